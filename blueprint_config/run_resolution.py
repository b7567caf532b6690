"""Orchestration logic for resolving and printing a simulation's properties."""

import argparse
import logging
from pathlib import Path
from typing import Any

from blueprint_config.errors import BlueprintConfigError, InvalidInputError
from blueprint_config.filtering_json_printer import print_json
from blueprint_config.load_config import load_config
from blueprint_config.resolve_properties import resolve_properties
from blueprint_config.simulation_coordinates import SimulationCoordinates

logger = logging.getLogger(__name__)


def run_resolution(args: argparse.Namespace) -> int:
    """Execute the resolution pipeline and print the effective properties."""
    try:
        config = load_config(args.config)
        coordinates = _coordinates_for(args, config)
        root = Path(args.root or config["resolution"]["root_dir"])
        file_name = args.file_name or config["resolution"]["file_name"]

        logger.info("Resolving %s for %s under %s", file_name, coordinates, root)
        resolved = resolve_properties(root, coordinates.path_elements, file_name)
    except BlueprintConfigError as exc:
        msg = f"error: {exc}"
        raise SystemExit(msg) from exc

    output = config["output"]
    skipped = [*output["skipped_keys"], *(args.skip or [])]
    print(
        print_json(
            resolved,
            *skipped,
            sort=args.sort or output["sort_keys"],
            indent=output["indent"],
        )
    )
    return 0


def _coordinates_for(
    args: argparse.Namespace, config: dict[str, Any]
) -> SimulationCoordinates:
    """Build coordinates, injecting the configured defaults at this boundary."""
    properties = parse_defines(args.define or [])
    coordinates_config = config["coordinates"]
    return SimulationCoordinates.from_simulation(
        args.simulation,
        properties,
        default_site=coordinates_config["default_site"],
        property_key=coordinates_config["property_key"],
    )


def parse_defines(defines: list[str]) -> dict[str, str]:
    """Turn ``key=value`` strings into a mapping; later entries win."""
    properties: dict[str, str] = {}
    for define in defines:
        key, sep, value = define.partition("=")
        if not sep or not key.strip():
            msg = f"Expecting key=value, got: {define}"
            raise InvalidInputError(msg)
        properties[key.strip()] = value
    return properties
