# tests/fixtures/graphs.py
"""Graph description builders for tests.

Usage:
    from tests.fixtures.graphs import make_vertex, make_edge_property, make_union_graph
"""

from __future__ import annotations

from typing import Any

from dagledger.contracts import (
    DataMovementType,
    DataSinkDescriptor,
    DataSourceDescriptor,
    DataSourceType,
    Edge,
    EdgeProperty,
    GraphDescription,
    GroupEdge,
    InputDescriptor,
    OutputCommitterDescriptor,
    OutputDescriptor,
    ProcessorDescriptor,
    RootInput,
    RootOutput,
    SchedulingType,
    Vertex,
    VertexGroup,
)

COMMITTER_CLASS = "org.example.FileOutputCommitter"


def make_vertex(
    name: str,
    *,
    inputs: tuple[RootInput, ...] = (),
    outputs: tuple[RootOutput, ...] = (),
    processor_text: str | None = None,
    processor_payload: dict[str, Any] | None = None,
) -> Vertex:
    """Vertex whose processor history text defaults to '<name> Processor HistoryText'."""
    if processor_text is None and processor_payload is None:
        processor_text = f"{name} Processor HistoryText"
    return Vertex(
        name=name,
        processor=ProcessorDescriptor("Processor", user_payload=processor_payload, text=processor_text),
        data_sources=inputs,
        data_sinks=outputs,
    )


def make_edge_property(
    movement: DataMovementType = DataMovementType.SCATTER_GATHER,
    source_type: DataSourceType = DataSourceType.PERSISTED,
    scheduling: SchedulingType = SchedulingType.SEQUENTIAL,
    *,
    output_class: str = "dummy output class",
    input_class: str = "dummy input class",
    text: str | None = "Dummy History Text",
) -> EdgeProperty:
    return EdgeProperty(
        data_movement_type=movement,
        data_source_type=source_type,
        scheduling_type=scheduling,
        edge_source=OutputDescriptor(output_class, text=text),
        edge_destination=InputDescriptor(input_class, text=text),
    )


def make_root_input(name: str = "input1", *, text: str | None = "input HistoryText") -> RootInput:
    return RootInput(name, DataSourceDescriptor(InputDescriptor("input.class", text=text)))


def make_root_output(
    name: str = "uvOut",
    *,
    text: str | None = "uvOut HistoryText",
    committer: bool = True,
) -> RootOutput:
    return RootOutput(
        name,
        DataSinkDescriptor(
            OutputDescriptor("output.class", text=text),
            OutputCommitterDescriptor(COMMITTER_CLASS) if committer else None,
        ),
    )


def make_union_graph() -> GraphDescription:
    """Three vertices; group uv12 = (vertex1, vertex2) feeds vertex3.

    vertex1 has one additional input, uv12 has one group output and
    vertex3 has its own output of the same name. The single group edge
    merges through merge.class.
    """
    uv_out = make_root_output()
    v1 = make_vertex("vertex1", inputs=(make_root_input(),))
    v2 = make_vertex("vertex2")
    v3 = make_vertex("vertex3", outputs=(uv_out,))
    group = VertexGroup("uv12", ("vertex1", "vertex2"), outputs=(uv_out,))
    group_edge = GroupEdge(
        group="uv12",
        vertex="vertex3",
        edge_property=make_edge_property(),
        merged_input=InputDescriptor("merge.class", text="Merge HistoryText"),
    )
    return GraphDescription(
        name="testDag",
        vertices=(v1, v2, v3),
        vertex_groups={"uv12": group},
        group_edges=(group_edge,),
    )


def make_linear_graph(names: tuple[str, ...] = ("a", "b", "c")) -> GraphDescription:
    """Vertices chained by direct ONE_TO_ONE edges, no groups."""
    vertices = tuple(make_vertex(name) for name in names)
    edges = tuple(
        Edge(src, dst, make_edge_property(DataMovementType.ONE_TO_ONE, DataSourceType.EPHEMERAL, SchedulingType.CONCURRENT))
        for src, dst in zip(names, names[1:], strict=False)
    )
    return GraphDescription(name="linear", vertices=vertices, edges=edges)
