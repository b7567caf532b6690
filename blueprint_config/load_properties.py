"""Logic for loading a single properties file from disk."""

from pathlib import Path

from blueprint_config.errors import MalformedSourceError, PropertiesIOError
from blueprint_config.parse_properties import parse_properties


def load_properties(path: Path) -> dict[str, str]:
    """Read and parse the properties file at ``path``.

    Storage failures raise ``PropertiesIOError``; content that cannot be
    decoded or parsed raises ``MalformedSourceError``.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise PropertiesIOError(path, exc.strerror or str(exc)) from exc

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedSourceError(path, f"not valid UTF-8 ({exc.reason})") from exc

    return parse_properties(text, path)
