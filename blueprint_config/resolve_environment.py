"""Resolve the effective environment properties of a load-test simulation.

The simulation is located in a ``tenant/site/application/scope`` directory
tree; every ``environment.properties`` found along that path is merged, the
most specific one winning.
"""

import argparse
import logging
from pathlib import Path

from blueprint_config.run_resolution import run_resolution


def main() -> int:
    """Run the resolution process."""
    ap = argparse.ArgumentParser(
        description=(
            "Resolve cascading environment properties for a simulation "
            "(application.tenant.scope.ClassName)."
        ),
    )
    ap.add_argument(
        "simulation",
        help="Dotted simulation name, e.g. computerdatabase.gatling.smoketest.Test",
    )
    ap.add_argument(
        "--root",
        type=Path,
        help="Root of the environment directory tree (default from config)",
    )
    ap.add_argument(
        "--file-name",
        help="Properties file name looked up at each level (default from config)",
    )
    ap.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    ap.add_argument(
        "-D",
        dest="define",
        action="append",
        metavar="KEY=VALUE",
        help="Simulation property, e.g. -D site=dev (repeatable)",
    )
    ap.add_argument(
        "--skip",
        action="append",
        metavar="KEY",
        help="Leave KEY out of the printed output (repeatable)",
    )
    ap.add_argument(
        "--sort",
        action="store_true",
        help="Print keys in alphabetical order",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every candidate file that is visited",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
