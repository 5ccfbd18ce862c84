"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in topsort configuration."""


@dataclass(slots=True, frozen=True)
class TopsortConfig:
    """Configuration loaded from pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    stable: bool = False
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> TopsortConfig:
    """Load and validate [tool.topsort] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed TopsortConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    topsort_section = data.get("tool", {}).get("topsort", {})

    if not topsort_section:
        return TopsortConfig(project_root=project_root)

    graph_path: Path | None = None
    if "graph" in topsort_section:
        graph_value = topsort_section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.topsort].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    stable = topsort_section.get("stable", False)
    if not isinstance(stable, bool):
        msg = "Invalid [tool.topsort].stable: expected boolean"
        raise ConfigError(msg)

    return TopsortConfig(graph=graph_path, stable=stable, project_root=project_root)


def get_config() -> TopsortConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        TopsortConfig (may be empty if no pyproject.toml or no [tool.topsort] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return TopsortConfig()
    return load_config(pyproject_path)
