# src/dagledger/core/history/converter.py
"""Graph description -> history record conversion.

Sequencing only; the work happens in the expander, the vertex converter
and the descriptor extractor:

1. validate the graph description
2. expand vertex groups into concrete edges and per-member outputs
3. convert every vertex against the concrete edge set
4. convert every concrete edge (direct and expanded)
5. summarise every vertex group
6. assemble the top-level record

Example:
    converter = DAGHistoryConverter()
    history = converter.convert(graph)
    history["version"]  # 1
"""

from __future__ import annotations

from typing import Any, cast

from dagledger.contracts import (
    ConversionError,
    DescriptorSerializationError,
    EdgeRecord,
    GraphDescription,
    GroupEdge,
    HistoryMap,
    MergedInputRecord,
    VertexGroup,
    VertexGroupRecord,
)
from dagledger.core.config import HISTORY_SCHEMA_VERSION, ConverterSettings
from dagledger.core.history.descriptors import DescriptorExtractor
from dagledger.core.history.expander import ConcreteEdge, ExpandedGraph, expand_graph
from dagledger.core.history.identity import EdgeIdAssigner
from dagledger.core.history.keys import (
    CLASS_KEY,
    DAG_INFO_KEY,
    DAG_NAME_KEY,
    DATA_MOVEMENT_TYPE_KEY,
    DATA_SOURCE_TYPE_KEY,
    EDGE_DESTINATION_CLASS_KEY,
    EDGE_ID_KEY,
    EDGE_MANAGER_CLASS_KEY,
    EDGE_SOURCE_CLASS_KEY,
    EDGES_KEY,
    INPUT_USER_PAYLOAD_AS_TEXT,
    INPUT_VERTEX_NAME_KEY,
    OUTPUT_USER_PAYLOAD_AS_TEXT,
    OUTPUT_VERTEX_NAME_KEY,
    SCHEDULING_TYPE_KEY,
    USER_PAYLOAD_AS_TEXT,
    VERSION_KEY,
    VERTEX_GROUP_DESTINATION_VERTEX_NAME_KEY,
    VERTEX_GROUP_EDGE_MERGED_INPUTS_KEY,
    VERTEX_GROUP_MEMBERS_KEY,
    VERTEX_GROUP_NAME_KEY,
    VERTEX_GROUP_OUTPUTS_KEY,
    VERTEX_GROUPS_KEY,
    VERTICES_KEY,
)
from dagledger.core.history.validation import validate_graph
from dagledger.core.history.vertices import convert_vertex
from dagledger.core.logging import get_logger

logger = get_logger(__name__)


class DAGHistoryConverter:
    """Converts graph descriptions into history records.

    Holds only immutable settings, so one instance can serve concurrent
    conversions. Each convert() call owns a fresh EdgeIdAssigner.
    """

    def __init__(self, settings: ConverterSettings | None = None) -> None:
        self._settings = settings or ConverterSettings()
        self._extractor = DescriptorExtractor(render_user_payloads=self._settings.render_user_payloads)

    @property
    def settings(self) -> ConverterSettings:
        return self._settings

    def convert(self, graph: GraphDescription) -> HistoryMap:
        """Convert graph into a history record.

        Args:
            graph: Fully built graph description (not mutated)

        Returns:
            Top-level history record

        Raises:
            GraphValidationError: If the graph violates a structural invariant
            StructuralReferenceError: If an edge or group names an unknown vertex
            DescriptorSerializationError: If a payload cannot be rendered
        """
        log = logger.bind(graph=graph.name)
        try:
            validate_graph(graph)
            expanded = expand_graph(graph, EdgeIdAssigner())

            vertices = [convert_vertex(vertex, expanded, self._extractor) for vertex in graph.vertices]
            edges = [self._convert_edge(edge) for edge in expanded.edges]
            groups = [self._convert_group(group, expanded) for group in graph.vertex_groups.values()]
        except ConversionError as e:
            log.warning("history_conversion_failed", error_type=type(e).__name__, error=str(e))
            raise

        history: dict[str, Any] = {
            DAG_NAME_KEY: graph.name,
            VERSION_KEY: HISTORY_SCHEMA_VERSION,
            VERTICES_KEY: vertices,
            EDGES_KEY: edges,
            VERTEX_GROUPS_KEY: groups,
        }
        if graph.dag_info is not None and self._settings.include_dag_info:
            history[DAG_INFO_KEY] = graph.dag_info

        log.info(
            "history_converted",
            vertices=len(vertices),
            edges=len(edges),
            vertex_groups=len(groups),
            expanded_edges=sum(1 for edge in expanded.edges if edge.origin_group is not None),
        )
        return cast(HistoryMap, history)

    def _convert_edge(self, edge: ConcreteEdge) -> EdgeRecord:
        """Convert one concrete edge.

        inputVertexName is the vertex producing data (the edge source) and
        outputVertexName the vertex consuming it. Edges expanded from a group
        source take their input payload text from the merged input.
        """
        prop = edge.edge_property
        try:
            record: dict[str, Any] = {
                EDGE_ID_KEY: edge.edge_id,
                INPUT_VERTEX_NAME_KEY: edge.source,
                OUTPUT_VERTEX_NAME_KEY: edge.destination,
                DATA_MOVEMENT_TYPE_KEY: prop.data_movement_type.value,
                DATA_SOURCE_TYPE_KEY: prop.data_source_type.value,
                SCHEDULING_TYPE_KEY: prop.scheduling_type.value,
                EDGE_SOURCE_CLASS_KEY: prop.edge_source.class_name,
                EDGE_DESTINATION_CLASS_KEY: prop.edge_destination.class_name,
            }
            output_text = self._extractor.payload_as_text(prop.edge_source)
            if output_text is not None:
                record[OUTPUT_USER_PAYLOAD_AS_TEXT] = output_text
            input_side = edge.merged_input if edge.merged_input is not None else prop.edge_destination
            input_text = self._extractor.payload_as_text(input_side)
            if input_text is not None:
                record[INPUT_USER_PAYLOAD_AS_TEXT] = input_text
        except DescriptorSerializationError as e:
            raise e.with_context(f"edge {edge.edge_id} ({edge.source} -> {edge.destination})") from e

        if prop.edge_manager is not None:
            record[EDGE_MANAGER_CLASS_KEY] = prop.edge_manager.class_name
        return cast(EdgeRecord, record)

    def _convert_group(self, group: VertexGroup, expanded: ExpandedGraph) -> VertexGroupRecord:
        """Summarise a vertex group: members, outputs, and one merged input per group edge."""
        try:
            record: dict[str, Any] = {
                VERTEX_GROUP_NAME_KEY: group.name,
                VERTEX_GROUP_MEMBERS_KEY: list(group.members),
                VERTEX_GROUP_OUTPUTS_KEY: [self._extractor.output_record(output) for output in group.outputs],
                VERTEX_GROUP_EDGE_MERGED_INPUTS_KEY: [
                    self._merged_input_record(group_edge) for group_edge in expanded.group_edges_by_group.get(group.name, ())
                ],
            }
        except DescriptorSerializationError as e:
            raise e.with_context(f"vertex group '{group.name}'") from e
        return cast(VertexGroupRecord, record)

    def _merged_input_record(self, group_edge: GroupEdge) -> MergedInputRecord:
        record: dict[str, str] = {
            VERTEX_GROUP_DESTINATION_VERTEX_NAME_KEY: group_edge.vertex,
            CLASS_KEY: group_edge.merged_input.class_name,
        }
        text = self._extractor.payload_as_text(group_edge.merged_input)
        if text is not None:
            record[USER_PAYLOAD_AS_TEXT] = text
        return cast(MergedInputRecord, record)


def convert_graph_to_history_map(
    graph: GraphDescription,
    settings: ConverterSettings | None = None,
) -> HistoryMap:
    """Convert graph into a history record with a one-off converter.

    Equivalent to DAGHistoryConverter(settings).convert(graph).
    """
    return DAGHistoryConverter(settings).convert(graph)
