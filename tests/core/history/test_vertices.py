# tests/core/history/test_vertices.py
"""Tests for vertex record conversion."""

import pytest

from dagledger.contracts import (
    DataSourceDescriptor,
    DescriptorSerializationError,
    GraphDescription,
    InputDescriptor,
    InputInitializerDescriptor,
    ProcessorDescriptor,
    RootInput,
    Vertex,
)
from dagledger.core.history.descriptors import DescriptorExtractor
from dagledger.core.history.expander import expand_graph
from dagledger.core.history.identity import EdgeIdAssigner
from dagledger.core.history.vertices import convert_vertex
from tests.fixtures.graphs import make_root_input, make_root_output, make_vertex


def _convert(graph: GraphDescription, name: str) -> dict:
    expanded = expand_graph(graph, EdgeIdAssigner())
    vertex = next(v for v in graph.vertices if v.name == name)
    return dict(convert_vertex(vertex, expanded, DescriptorExtractor()))


class TestConvertVertex:
    def test_bare_vertex_has_only_required_keys(self) -> None:
        graph = GraphDescription(name="g", vertices=(make_vertex("solo"),))

        record = _convert(graph, "solo")

        assert record == {
            "vertexName": "solo",
            "processorClass": "Processor",
            "userPayloadAsText": "solo Processor HistoryText",
        }

    def test_processor_without_payload_reports_none(self) -> None:
        graph = GraphDescription(name="g", vertices=(Vertex("v", ProcessorDescriptor("P")),))

        assert _convert(graph, "v")["userPayloadAsText"] is None

    def test_direct_outputs_precede_group_outputs(self, union_graph: GraphDescription) -> None:
        own = make_root_output("own", committer=False)
        vertices = tuple(
            make_vertex("vertex1", inputs=(make_root_input(),), outputs=(own,)) if v.name == "vertex1" else v for v in union_graph.vertices
        )
        graph = GraphDescription(
            name="g",
            vertices=vertices,
            vertex_groups=union_graph.vertex_groups,
            group_edges=union_graph.group_edges,
        )

        record = _convert(graph, "vertex1")

        assert [o["name"] for o in record["additionalOutputs"]] == ["own", "uvOut"]
        assert len(record["additionalInputs"]) == 1
        assert record["outEdgeIds"] == ["1"]
        assert "inEdgeIds" not in record

    def test_group_member_does_not_inherit_inputs(self, union_graph: GraphDescription) -> None:
        record = _convert(union_graph, "vertex2")

        assert "additionalInputs" not in record
        assert len(record["additionalOutputs"]) == 1

    def test_input_without_payload_omits_payload_key(self) -> None:
        graph = GraphDescription(name="g", vertices=(make_vertex("v", inputs=(make_root_input(text=None),)),))

        assert _convert(graph, "v")["additionalInputs"] == [{"name": "input1", "class": "input.class"}]

    def test_input_initializer_not_recorded(self) -> None:
        root_input = RootInput("in1", DataSourceDescriptor(InputDescriptor("input.class"), InputInitializerDescriptor("Init")))
        graph = GraphDescription(name="g", vertices=(make_vertex("v", inputs=(root_input,)),))

        (record,) = _convert(graph, "v")["additionalInputs"]

        assert record == {"name": "in1", "class": "input.class"}

    def test_serialization_error_names_vertex(self) -> None:
        bad = Vertex("v", ProcessorDescriptor("P", user_payload={"n": float("nan")}))
        expanded = expand_graph(GraphDescription(name="g", vertices=(bad,)), EdgeIdAssigner())

        with pytest.raises(DescriptorSerializationError) as exc_info:
            convert_vertex(bad, expanded, DescriptorExtractor())

        assert exc_info.value.context == "vertex 'v'"
        assert isinstance(exc_info.value.__cause__, DescriptorSerializationError)
