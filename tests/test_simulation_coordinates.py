"""Tests for simulation coordinates parsing."""

import pytest

from blueprint_config.errors import InvalidInputError
from blueprint_config.simulation_coordinates import SimulationCoordinates

SIMULATION_CLASS_NAME = "application.tenant.scenario.Test"
PATH_ELEMENTS = ("tenant", "local", "application", "scenario")

EXPECTED = SimulationCoordinates("application", "tenant", "local", "scenario")


class Application:
    """Namespace mimicking an application.tenant.scenario package."""

    class Tenant:
        class Scenario:
            class Test:
                """Stand-in for a simulation class."""


def test_from_class_name() -> None:
    """Verify coordinates are taken from the last four dotted parts."""
    assert SimulationCoordinates.from_simulation(SIMULATION_CLASS_NAME) == EXPECTED


def test_from_class_name_with_package_prefix() -> None:
    """Verify leading package parts are ignored."""
    name = "com.example.application.tenant.scenario.Test"
    assert SimulationCoordinates.from_class_name(name, "local") == EXPECTED


def test_from_class_name_with_empty_properties() -> None:
    """Verify an empty property mapping falls back to the default site."""
    coordinates = SimulationCoordinates.from_simulation(SIMULATION_CLASS_NAME, {})
    assert coordinates == EXPECTED


def test_site_from_properties() -> None:
    """Verify the 'site' property overrides the default site."""
    coordinates = SimulationCoordinates.from_simulation(
        SIMULATION_CLASS_NAME, {"site": "DEV"}
    )
    assert coordinates.site == "dev"


def test_default_site_is_injectable() -> None:
    """Verify the default site is supplied by the caller."""
    coordinates = SimulationCoordinates.from_simulation(
        SIMULATION_CLASS_NAME, default_site="uat"
    )
    assert coordinates.site == "uat"


def test_coordinates_property_takes_precedence() -> None:
    """Verify an explicit coordinates property wins over the class name."""
    coordinates = SimulationCoordinates.from_simulation(
        "ignored.ignored.ignored.Ignored",
        {"simulation.coordinates": "app-ten-prod-loadtest", "site": "dev"},
    )
    assert coordinates == SimulationCoordinates("app", "ten", "prod", "loadtest")


def test_custom_property_key() -> None:
    """Verify the coordinates property key can be changed."""
    coordinates = SimulationCoordinates.from_simulation(
        SIMULATION_CLASS_NAME,
        {"coords": "a-b-c-d"},
        property_key="coords",
    )
    assert coordinates == SimulationCoordinates("a", "b", "c", "d")


def test_from_class_and_instance() -> None:
    """Verify classes and instances use their qualified name."""
    simulation = Application.Tenant.Scenario.Test
    assert SimulationCoordinates.from_simulation(simulation) == EXPECTED
    assert SimulationCoordinates.from_simulation(simulation()) == EXPECTED


def test_scenario_name() -> None:
    """Verify conversion to a scenario name."""
    coordinates = SimulationCoordinates.from_simulation(SIMULATION_CLASS_NAME)
    assert coordinates.scenario_name == "application-tenant-local-scenario"


def test_str() -> None:
    """Verify the string representation."""
    assert str(SimulationCoordinates.from_simulation(SIMULATION_CLASS_NAME)) == (
        "{application='application', tenant='tenant', site='local', scope='scenario'}"
    )


def test_path_elements() -> None:
    """Verify the directory nesting order."""
    coordinates = SimulationCoordinates.from_simulation(SIMULATION_CLASS_NAME)
    assert coordinates.path_elements == PATH_ELEMENTS


def test_normalization() -> None:
    """Verify parts are trimmed and lower-cased."""
    coordinates = SimulationCoordinates(" App ", "TENANT", "Local", "Scope ")
    assert coordinates == SimulationCoordinates("app", "tenant", "local", "scope")
    assert hash(coordinates) == hash(
        SimulationCoordinates("app", "tenant", "local", "scope")
    )


@pytest.mark.parametrize(
    "parts",
    [
        ("", "t", "s", "x"),
        ("a", "  ", "s", "x"),
        ("a", "t", None, "x"),
        ("a", "/etc", "s", "x"),
        ("a", "t", "..", "x"),
        ("a", "t", "s", "x/y"),
    ],
)
def test_invalid_parts_are_rejected(parts: tuple[str, str, str, str]) -> None:
    """Verify that empty or path-like coordinates are invalid input."""
    with pytest.raises(InvalidInputError):
        SimulationCoordinates(*parts)


@pytest.mark.parametrize("name", ["a-b-c", "a-b-c-d-e", ""])
def test_coordinates_name_arity(name: str) -> None:
    """Verify that coordinates names need exactly four parts."""
    with pytest.raises(InvalidInputError):
        SimulationCoordinates.from_coordinates_name(name)


def test_class_name_arity() -> None:
    """Verify that class names need at least four parts."""
    with pytest.raises(InvalidInputError):
        SimulationCoordinates.from_simulation("tenant.scenario.Test")


def test_none_simulation_is_rejected() -> None:
    """Verify that a missing simulation is invalid input."""
    with pytest.raises(InvalidInputError):
        SimulationCoordinates.from_simulation(None)


def test_coordinates_name_cannot_carry_paths() -> None:
    """Verify a coordinates property cannot point outside the tree."""
    with pytest.raises(InvalidInputError):
        SimulationCoordinates.from_coordinates_name("app-/etc-dev-smoke")
