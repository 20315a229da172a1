"""Graph description types: the read-only input of a history conversion.

A GraphDescription is built once by an external builder and never
mutated afterwards. Every type here is frozen; sequences are tuples and
the vertex group mapping is wrapped in a read-only proxy.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from dagledger.contracts.descriptors import (
    DataSinkDescriptor,
    DataSourceDescriptor,
    EdgeManagerPluginDescriptor,
    InputDescriptor,
    OutputDescriptor,
    ProcessorDescriptor,
)
from dagledger.contracts.enums import (
    DataMovementType,
    DataSourceType,
    GroupEdgeDirection,
    SchedulingType,
)


def _validate_enum(value: object, enum_type: type, field_name: str) -> None:
    """Reject raw strings where an enum member is required."""
    if not isinstance(value, enum_type):
        raise TypeError(f"{field_name} must be {enum_type.__name__}, got {type(value).__name__}: {value!r}")


@dataclass(frozen=True, slots=True)
class RootInput:
    """A named additional input attached directly to a vertex."""

    name: str
    descriptor: DataSourceDescriptor


@dataclass(frozen=True, slots=True)
class RootOutput:
    """A named additional output attached to a vertex or a vertex group."""

    name: str
    descriptor: DataSinkDescriptor


@dataclass(frozen=True, slots=True)
class Vertex:
    """A unit of processing logic in the graph."""

    name: str
    processor: ProcessorDescriptor
    data_sources: tuple[RootInput, ...] = ()
    data_sinks: tuple[RootOutput, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_sources", tuple(self.data_sources))
        object.__setattr__(self, "data_sinks", tuple(self.data_sinks))


@dataclass(frozen=True, slots=True)
class EdgeProperty:
    """Movement, lifetime, and scheduling semantics shared by edges.

    Strict contract - the three type fields must be enum members.
    """

    data_movement_type: DataMovementType
    data_source_type: DataSourceType
    scheduling_type: SchedulingType
    edge_source: OutputDescriptor
    edge_destination: InputDescriptor
    edge_manager: EdgeManagerPluginDescriptor | None = None

    def __post_init__(self) -> None:
        _validate_enum(self.data_movement_type, DataMovementType, "data_movement_type")
        _validate_enum(self.data_source_type, DataSourceType, "data_source_type")
        _validate_enum(self.scheduling_type, SchedulingType, "scheduling_type")


@dataclass(frozen=True, slots=True)
class Edge:
    """A direct data-flow link between two vertices, referenced by name."""

    source: str
    destination: str
    edge_property: EdgeProperty


@dataclass(frozen=True, slots=True)
class VertexGroup:
    """A named set of vertices treated as one logical producer.

    outputs are attached to every member at conversion time.
    """

    name: str
    members: tuple[str, ...]
    outputs: tuple[RootOutput, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))
        object.__setattr__(self, "outputs", tuple(self.outputs))


@dataclass(frozen=True, slots=True)
class GroupEdge:
    """An edge with a vertex group on one side and a single vertex on the other.

    With GROUP_TO_VERTEX (the default) the group is the source and
    merged_input is the descriptor the destination vertex reads with.
    """

    group: str
    vertex: str
    edge_property: EdgeProperty
    merged_input: InputDescriptor
    direction: GroupEdgeDirection = GroupEdgeDirection.GROUP_TO_VERTEX

    def __post_init__(self) -> None:
        _validate_enum(self.direction, GroupEdgeDirection, "direction")

    @property
    def group_is_source(self) -> bool:
        return self.direction is GroupEdgeDirection.GROUP_TO_VERTEX


@dataclass(frozen=True, slots=True)
class GraphDescription:
    """A complete, static job graph ready for conversion."""

    name: str
    vertices: tuple[Vertex, ...] = ()
    edges: tuple[Edge, ...] = ()
    vertex_groups: Mapping[str, VertexGroup] = field(default_factory=dict)
    group_edges: tuple[GroupEdge, ...] = ()
    dag_info: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "group_edges", tuple(self.group_edges))
        object.__setattr__(self, "vertex_groups", MappingProxyType(dict(self.vertex_groups)))
