"""Pydantic models for the nodes + links graph record.

The record layout is the one produced by ``Graph.serialize``::

    {
        "nodes": [{"id": "A"}, {"id": "B"}],
        "links": [{"source": "A", "target": "B", "weight": 1}],
    }
"""

from collections.abc import Hashable
from decimal import Decimal
from fractions import Fraction

from pydantic import BaseModel, ConfigDict, Field


class NodeRecord(BaseModel):
    """A single node entry."""

    model_config = ConfigDict(frozen=True)

    id: Hashable


class LinkRecord(BaseModel):
    """A single directed, weighted edge entry.

    ``weight`` defaults to 1 when a record omits it; ``Graph.serialize``
    always writes it out. Decimal and Fraction weights keep their type.
    """

    model_config = ConfigDict(frozen=True)

    source: Hashable
    target: Hashable
    weight: int | float | Decimal | Fraction = 1


class GraphRecord(BaseModel):
    """Serialized form of a graph: nodes in first-seen order, links grouped by source."""

    model_config = ConfigDict(frozen=True)

    nodes: list[NodeRecord] = Field(default_factory=list)
    links: list[LinkRecord] = Field(default_factory=list)
