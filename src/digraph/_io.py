"""Reading and writing graph files in JSON and TOML."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from ._errors import GraphFormatError
from ._graph import Graph
from ._records import GraphRecord

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".toml")


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        expected = ", ".join(SUPPORTED_SUFFIXES)
        msg = f"Unsupported graph file format '{path.suffix}' for {path}. Expected one of: {expected}"
        raise GraphFormatError(msg)
    return suffix


def load_record(path: Path) -> GraphRecord:
    """Read and validate a serialized graph from a JSON or TOML file.

    TOML files hold the record under top-level ``nodes`` and ``links``
    arrays. Inline tables and ``[[nodes]]`` / ``[[links]]`` arrays of tables
    are both accepted::

        nodes = [{ id = "A" }, { id = "B" }]

        [[links]]
        source = "A"
        target = "B"
        weight = 2

    Raises:
        GraphFormatError: If the file suffix is neither ``.json`` nor ``.toml``.
        pydantic.ValidationError: If the file content is not a valid record.

    """
    suffix = _check_suffix(path)

    if suffix == ".json":
        record = GraphRecord.model_validate_json(path.read_bytes())
    else:
        with path.open("rb") as f:
            record = GraphRecord.model_validate(tomllib.load(f))

    logger.debug(f"Loaded {len(record.nodes)} nodes and {len(record.links)} links from {path}")
    return record


def load_graph(path: Path) -> Graph[Any]:
    """Load a graph from a JSON or TOML file."""
    return Graph.from_serialized(load_record(path))


def dump_graph(graph: Graph[Any], path: Path) -> None:
    """Write a graph to a JSON or TOML file, chosen by the file suffix.

    Raises:
        GraphFormatError: If the file suffix is neither ``.json`` nor ``.toml``.

    """
    suffix = _check_suffix(path)
    data = graph.serialize()

    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".json":
        path.write_text(json.dumps(data, indent=2) + "\n")
    else:
        with path.open("wb") as f:
            tomli_w.dump(data, f)

    logger.debug(f"Exported graph to {path}")
