"""Value type capturing the coordinates of a load-test simulation."""

from collections.abc import Mapping
from dataclasses import dataclass

from blueprint_config.build_candidate_directories import is_single_level
from blueprint_config.errors import InvalidInputError

NR_OF_PARTS = 4
SITE_DEFAULT = "local"
SITE_PROPERTY_KEY = "site"
COORDINATES_PROPERTY_KEY = "simulation.coordinates"


@dataclass(frozen=True)
class SimulationCoordinates:
    """Identifies a simulation, similar to Maven coordinates.

    All parts are stored stripped and lower-cased.
    """

    application: str  # application under test, e.g. "computerdatabase"
    tenant: str  # tenant used for testing, e.g. "gatling"
    site: str  # staging site, e.g. "local", "dev", "uat", "prod"
    scope: str  # scope of testing, e.g. "smoketest", "loadtest"

    def __post_init__(self) -> None:
        """Validate and normalize every coordinate."""
        for name in ("application", "tenant", "site", "scope"):
            object.__setattr__(self, name, _normalize(getattr(self, name), name))

    @classmethod
    def from_coordinates_name(cls, value: str) -> "SimulationCoordinates":
        """Parse ``application-tenant-site-scope``."""
        parts = _require_str(value, "coordinates name").split("-")
        if len(parts) != NR_OF_PARTS:
            msg = f"Expecting exactly four parts: {value}"
            raise InvalidInputError(msg)
        application, tenant, site, scope = parts
        return cls(application, tenant, site, scope)

    @classmethod
    def from_class_name(cls, class_name: str, site: str) -> "SimulationCoordinates":
        """Parse a dotted ``application.tenant.scope.ClassName`` identifier.

        Leading package parts beyond the last four are ignored; the site is
        not encoded in the name and must be supplied.
        """
        parts = _require_str(class_name, "class name").split(".")
        if len(parts) < NR_OF_PARTS:
            msg = f"Expecting at least four parts: {class_name}"
            raise InvalidInputError(msg)
        return cls(parts[-4], parts[-3], site, parts[-2])

    @classmethod
    def from_simulation(
        cls,
        simulation: object,
        properties: Mapping[str, str] | None = None,
        default_site: str = SITE_DEFAULT,
        property_key: str = COORDINATES_PROPERTY_KEY,
    ) -> "SimulationCoordinates":
        """Derive coordinates for a simulation name, class or instance.

        An explicit ``property_key`` entry in ``properties`` takes precedence
        over the simulation's name. Otherwise the site comes from the
        ``site`` property, falling back to ``default_site``.
        """
        if simulation is None:
            raise InvalidInputError("simulation must not be None")
        props = properties or {}
        if property_key in props:
            return cls.from_coordinates_name(props[property_key])
        site = props.get(SITE_PROPERTY_KEY, default_site)
        return cls.from_class_name(_class_name_of(simulation), site)

    @property
    def scenario_name(self) -> str:
        """Return ``application-tenant-site-scope``."""
        return f"{self.application}-{self.tenant}-{self.site}-{self.scope}"

    @property
    def path_elements(self) -> tuple[str, str, str, str]:
        """Return the directory nesting order used for property resolution."""
        return (self.tenant, self.site, self.application, self.scope)

    def __str__(self) -> str:
        return (
            f"{{application='{self.application}', tenant='{self.tenant}', "
            f"site='{self.site}', scope='{self.scope}'}}"
        )


def _class_name_of(simulation: object) -> str:
    """Take the string itself, or the qualified name of a class or instance."""
    if isinstance(simulation, str):
        return simulation
    cls = simulation if isinstance(simulation, type) else type(simulation)
    return f"{cls.__module__}.{cls.__qualname__}"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str) or not value:
        msg = f"{name} must be a non-empty string, got {value!r}"
        raise InvalidInputError(msg)
    return value


def _normalize(value: object, name: str) -> str:
    normalized = _require_str(value, name).strip().lower()
    if not normalized:
        msg = f"{name} must not be blank"
        raise InvalidInputError(msg)
    if not is_single_level(normalized):
        msg = f"{name} must name a single directory, got {value!r}"
        raise InvalidInputError(msg)
    return normalized
