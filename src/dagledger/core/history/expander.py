# src/dagledger/core/history/expander.py
"""Vertex group expansion.

A vertex group behaves like a macro: one group edge stands for one
concrete edge per member, and one group output stands for one additional
output per member. Expansion runs once, up front, producing the flat
concrete edge set that every later step reads. Vertices are never
expanded lazily, so a vertex's recorded edge ids and the emitted edge
list cannot disagree.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

import networkx as nx
from networkx import MultiDiGraph

from dagledger.contracts import (
    EdgeID,
    EdgeProperty,
    GraphDescription,
    GroupEdge,
    InputDescriptor,
    RootOutput,
    StructuralReferenceError,
    VertexGroup,
)
from dagledger.core.history.identity import EdgeIdAssigner
from dagledger.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ConcreteEdge:
    """One edge as it appears in the history record.

    merged_input is set only on edges expanded from a group source. It
    supplies the input-side payload text; both endpoint classes still
    come from edge_property.
    """

    edge_id: EdgeID
    source: str
    destination: str
    edge_property: EdgeProperty
    origin_group: str | None = None
    merged_input: InputDescriptor | None = None


@dataclass(frozen=True)
class ExpandedGraph:
    """The fully expanded graph: concrete edges plus per-vertex group outputs.

    topology is a frozen MultiDiGraph over vertex names whose edges are
    keyed by edge id and carry their position in ``edges`` as ``seq``.
    """

    edges: tuple[ConcreteEdge, ...]
    group_outputs: Mapping[str, tuple[RootOutput, ...]]
    group_edges_by_group: Mapping[str, tuple[GroupEdge, ...]]
    topology: MultiDiGraph[str]

    def in_edge_ids(self, vertex_name: str) -> list[EdgeID]:
        """Ids of concrete edges ending at vertex_name, in emission order."""
        in_edges = self.topology.in_edges(vertex_name, keys=True, data="seq")
        return [EdgeID(key) for _, _, key, _ in sorted(in_edges, key=lambda e: e[3])]

    def out_edge_ids(self, vertex_name: str) -> list[EdgeID]:
        """Ids of concrete edges starting at vertex_name, in emission order."""
        out_edges = self.topology.out_edges(vertex_name, keys=True, data="seq")
        return [EdgeID(key) for _, _, key, _ in sorted(out_edges, key=lambda e: e[3])]

    def group_outputs_for(self, vertex_name: str) -> tuple[RootOutput, ...]:
        """Outputs the vertex inherits from the groups it belongs to."""
        return self.group_outputs.get(vertex_name, ())


def expand_group_edge(
    group_edge: GroupEdge,
    group: VertexGroup,
    assigner: EdgeIdAssigner,
) -> list[ConcreteEdge]:
    """Expand one group edge into one concrete edge per group member.

    Members are visited in declared order and each concrete edge receives
    its own identifier. With the group as source, every member feeds the
    vertex and the merged input travels with each edge for its payload
    text. With the group as destination, the vertex feeds every member.
    The edge property is never altered.

    Raises:
        StructuralReferenceError: If group is not the group named by group_edge
    """
    if group.name != group_edge.group:
        raise StructuralReferenceError(f"Group edge to '{group_edge.vertex}'", group_edge.group, kind="vertex group")

    expanded: list[ConcreteEdge] = []
    for member in group.members:
        if group_edge.group_is_source:
            source, destination = member, group_edge.vertex
            merged_input: InputDescriptor | None = group_edge.merged_input
        else:
            source, destination = group_edge.vertex, member
            merged_input = None
        expanded.append(
            ConcreteEdge(
                edge_id=assigner.next_id(),
                source=source,
                destination=destination,
                edge_property=group_edge.edge_property,
                origin_group=group.name,
                merged_input=merged_input,
            )
        )
    return expanded


def expand_group_outputs(vertex_groups: Mapping[str, VertexGroup]) -> dict[str, list[RootOutput]]:
    """Attach every group output to every member of its group.

    A group with K outputs and N members contributes K x N entries. A
    vertex in several groups collects outputs in group declaration order.
    """
    per_vertex: dict[str, list[RootOutput]] = {}
    for group in vertex_groups.values():
        if not group.outputs:
            continue
        for member in group.members:
            per_vertex.setdefault(member, []).extend(group.outputs)
    return per_vertex


def expand_graph(graph: GraphDescription, assigner: EdgeIdAssigner) -> ExpandedGraph:
    """Run the expansion pass over a validated graph description.

    Direct edges come first in declaration order, followed by the
    expansion of each group edge in declaration order.

    Args:
        graph: Graph description that already passed validate_graph()
        assigner: Identifier source owned by the current conversion

    Returns:
        ExpandedGraph holding every concrete edge and group output
    """
    edges: list[ConcreteEdge] = [
        ConcreteEdge(
            edge_id=assigner.next_id(),
            source=edge.source,
            destination=edge.destination,
            edge_property=edge.edge_property,
        )
        for edge in graph.edges
    ]

    by_group: dict[str, list[GroupEdge]] = {}
    for group_edge in graph.group_edges:
        group = graph.vertex_groups[group_edge.group]
        expanded = expand_group_edge(group_edge, group, assigner)
        edges.extend(expanded)
        by_group.setdefault(group.name, []).append(group_edge)
        logger.debug(
            "group_edge_expanded",
            graph=graph.name,
            group=group.name,
            vertex=group_edge.vertex,
            direction=group_edge.direction.value,
            edge_ids=[e.edge_id for e in expanded],
        )

    topology: MultiDiGraph[str] = nx.MultiDiGraph()
    topology.add_nodes_from(vertex.name for vertex in graph.vertices)
    for seq, edge in enumerate(edges):
        topology.add_edge(edge.source, edge.destination, key=edge.edge_id, seq=seq)

    group_outputs = expand_group_outputs(graph.vertex_groups)

    return ExpandedGraph(
        edges=tuple(edges),
        group_outputs=MappingProxyType({name: tuple(outputs) for name, outputs in group_outputs.items()}),
        group_edges_by_group=MappingProxyType({name: tuple(ges) for name, ges in by_group.items()}),
        topology=nx.freeze(topology),
    )
