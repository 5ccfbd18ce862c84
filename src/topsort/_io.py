import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ._graph import Graph

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error reading a graph description file."""


class GraphFile(BaseModel):
    """Contents of a graph description TOML file.

    Example:
        ```toml
        nodes = ["standalone"]

        [edges]
        app = ["lib", "utils"]
        lib = ["utils"]
        ```

    """

    model_config = ConfigDict(extra="forbid")

    nodes: list[str] = []
    edges: dict[str, list[str]] = {}


def toml_to_graph(toml_contents: dict[str, Any]) -> Graph[str]:
    """Convert parsed TOML contents to a graph.

    Nodes listed under ``nodes`` are added first, then each entry of the
    ``edges`` table adds one edge per target, in file order.

    Raises:
        GraphFileError: If the contents do not describe a graph.

    """
    try:
        graph_file = GraphFile.model_validate(toml_contents)
    except ValidationError as e:
        msg = f"Invalid graph description: {e}"
        raise GraphFileError(msg) from e

    graph: Graph[str] = Graph.from_edges(
        ((source, target) for source, targets in graph_file.edges.items() for target in targets),
        nodes=graph_file.nodes,
    )
    logger.debug(f"Built graph with {len(graph)} nodes")
    return graph


def load_graph(input_path: Path | str) -> Graph[str]:
    """Load a graph from a TOML description file.

    Args:
        input_path: Path to the TOML file

    Returns:
        The graph described by the file

    Raises:
        GraphFileError: If the file cannot be read, is not valid TOML, or does not
            describe a graph.

    """
    input_path = Path(input_path)

    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {input_path}"
        raise GraphFileError(msg) from e
    except OSError as e:
        msg = f"Cannot read graph file {input_path}: {e.strerror or e}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise GraphFileError(msg) from e
    except UnicodeDecodeError as e:
        msg = f"Graph file is not valid UTF-8: {input_path}"
        raise GraphFileError(msg) from e

    graph = toml_to_graph(toml_contents)
    logger.debug(f"Loaded graph from {input_path}")
    return graph
