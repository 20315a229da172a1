# src/dagledger/core/history/validation.py
"""Structural checks run before any expansion.

A graph that fails here produces no history record at all. Acyclicity
and resource feasibility are the builder's concern and are not checked.
"""

from __future__ import annotations

import difflib
from collections import Counter

from dagledger.contracts import (
    GraphDescription,
    GraphValidationError,
    StructuralReferenceError,
)


def _suggest_similar(name: str, candidates: list[str]) -> list[str]:
    """Suggest similar names for reference errors."""
    return difflib.get_close_matches(name, candidates, n=3, cutoff=0.6)


def _check_vertex_reference(referrer: str, name: str, known: set[str]) -> None:
    if name in known:
        return
    error = StructuralReferenceError(referrer, name)
    suggestions = _suggest_similar(name, sorted(known))
    if suggestions:
        error.add_note(f"Did you mean: {', '.join(suggestions)}?")
    raise error


def validate_graph(graph: GraphDescription) -> None:
    """Validate the graph description's structural invariants.

    Validates:
    1. Vertex names are unique
    2. Vertex group names do not collide with vertex names
    3. Each vertex group is keyed by its own name, has at least two
       members, no duplicate members, and no member named after itself
    4. Every group member, edge endpoint and group edge endpoint exists

    Raises:
        GraphValidationError: If an invariant is violated
        StructuralReferenceError: If a name cannot be resolved
    """
    counts = Counter(vertex.name for vertex in graph.vertices)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise GraphValidationError(f"Graph '{graph.name}' has duplicate vertex names: {duplicates}")
    vertex_names = set(counts)

    for key, group in graph.vertex_groups.items():
        if group.name != key:
            raise GraphValidationError(f"Vertex group registered as '{key}' is named '{group.name}'")
        if group.name in vertex_names:
            raise GraphValidationError(f"Vertex group '{group.name}' has the same name as a vertex")
        if len(group.members) < 2:
            raise GraphValidationError(f"Vertex group '{group.name}' needs at least two members, got {len(group.members)}")
        if group.name in group.members:
            raise GraphValidationError(f"Vertex group '{group.name}' lists itself as a member")
        repeated = sorted(name for name, count in Counter(group.members).items() if count > 1)
        if repeated:
            raise GraphValidationError(f"Vertex group '{group.name}' repeats members: {repeated}")
        for member in group.members:
            _check_vertex_reference(f"Vertex group '{group.name}'", member, vertex_names)

    for edge in graph.edges:
        referrer = f"Edge {edge.source} -> {edge.destination}"
        _check_vertex_reference(referrer, edge.source, vertex_names)
        _check_vertex_reference(referrer, edge.destination, vertex_names)

    for group_edge in graph.group_edges:
        referrer = f"Group edge between '{group_edge.group}' and '{group_edge.vertex}'"
        if group_edge.group not in graph.vertex_groups:
            raise StructuralReferenceError(referrer, group_edge.group, kind="vertex group")
        _check_vertex_reference(referrer, group_edge.vertex, vertex_names)
