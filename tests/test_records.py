"""Tests for the pydantic graph record models."""

import pytest
from pydantic import ValidationError

from digraph import Graph, GraphRecord, LinkRecord, NodeRecord


class TestGraphRecord:
    def test_empty_record(self) -> None:
        record = GraphRecord()
        assert record.nodes == []
        assert record.links == []

    def test_link_weight_defaults_to_one(self) -> None:
        assert LinkRecord(source="a", target="b").weight == 1

    def test_int_weight_stays_int(self) -> None:
        weight = LinkRecord.model_validate({"source": "a", "target": "b", "weight": 7}).weight
        assert weight == 7
        assert isinstance(weight, int)

    def test_float_weight(self) -> None:
        assert LinkRecord(source="a", target="b", weight=2.5).weight == 2.5

    def test_unhashable_node_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NodeRecord.model_validate({"id": ["not", "hashable"]})

    def test_non_numeric_weight_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LinkRecord.model_validate({"source": "a", "target": "b", "weight": "heavy"})

    def test_records_are_frozen(self) -> None:
        node = NodeRecord(id="a")
        with pytest.raises(ValidationError):
            node.id = "b"  # type: ignore[misc]

    def test_to_record_matches_serialize(self) -> None:
        graph = Graph.from_edges([("a", "b", 3), ("b", "c")])
        record = graph.to_record()
        assert record.nodes == [NodeRecord(id="a"), NodeRecord(id="b"), NodeRecord(id="c")]
        assert record.links == [
            LinkRecord(source="a", target="b", weight=3),
            LinkRecord(source="b", target="c", weight=1),
        ]
        assert record.model_dump() == graph.serialize()

    def test_integer_node_ids(self) -> None:
        graph = Graph.from_serialized({"nodes": [{"id": 1}, {"id": 2}], "links": [{"source": 1, "target": 2}]})
        assert graph.all_nodes() == [1, 2]
        assert graph.adjacent_to(1) == (2,)
