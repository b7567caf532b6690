"""Development script to run checks (linting, tests) and a sample resolution."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally resolve a simulation."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample resolution."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, without fixing"
    )
    parser.add_argument(
        "--simulation",
        help="Resolve this simulation with blueprint-env after the checks pass",
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
            "Ruff Linting & Fixes",
        )

    run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
    run_command(["uv", "run", "ruff", "check"], "Ruff Lint Check")
    run_command(
        [
            "uv",
            "run",
            "pytest",
            "--cov",
            "--cov-report=term-missing",
            "--cov-fail-under=90",
        ],
        "Tests",
    )

    if args.simulation:
        run_command(
            ["uv", "run", "blueprint-env", args.simulation, "--sort"],
            "Sample Resolution",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
