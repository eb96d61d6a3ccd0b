"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in digraph configuration."""


@dataclass(slots=True, frozen=True)
class DigraphConfig:
    """Configuration loaded from the ``[tool.digraph]`` table of pyproject.toml.

    Relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start_dir`` (default: the working directory)."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(pyproject_path: Path) -> DigraphConfig:
    """Load and validate [tool.digraph] config from pyproject.toml.

    Raises:
        ConfigError: If the file is not valid TOML or a value has the wrong type.

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("digraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.digraph] configuration: expected a table"
        raise ConfigError(msg)

    graph_path: Path | None = None
    if "graph" in section:
        graph_value = section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.digraph].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    return DigraphConfig(graph=graph_path, project_root=project_root)


def get_config() -> DigraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DigraphConfig (may be empty if no pyproject.toml or no [tool.digraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DigraphConfig()
    return load_config(pyproject_path)
