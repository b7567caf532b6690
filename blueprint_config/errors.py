"""Exception taxonomy for property resolution."""

from pathlib import Path


class BlueprintConfigError(Exception):
    """Base exception for all resolution errors."""


class ConfigError(BlueprintConfigError):
    """The harness configuration file could not be used."""


class InvalidInputError(BlueprintConfigError, ValueError):
    """The caller supplied arguments that can never be resolved."""


class MalformedSourceError(BlueprintConfigError):
    """A properties file exists but could not be parsed."""

    def __init__(self, path: Path, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Malformed properties file {path}: {details}")


class PropertiesIOError(BlueprintConfigError):
    """A candidate path could not be read from storage."""

    def __init__(self, path: Path, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Cannot read {path}: {details}")
