# src/dagledger/core/history/vertices.py
"""Vertex records."""

from __future__ import annotations

from typing import Any, cast

from dagledger.contracts import (
    DescriptorSerializationError,
    Vertex,
    VertexRecord,
)
from dagledger.core.history.descriptors import DescriptorExtractor
from dagledger.core.history.expander import ExpandedGraph
from dagledger.core.history.keys import (
    ADDITIONAL_INPUTS_KEY,
    ADDITIONAL_OUTPUTS_KEY,
    IN_EDGE_IDS_KEY,
    OUT_EDGE_IDS_KEY,
    PROCESSOR_CLASS_KEY,
    USER_PAYLOAD_AS_TEXT,
    VERTEX_NAME_KEY,
)


def convert_vertex(
    vertex: Vertex,
    expanded: ExpandedGraph,
    extractor: DescriptorExtractor,
) -> VertexRecord:
    """Convert one vertex using the fully expanded edge set.

    Additional inputs are only those attached to the vertex itself.
    Additional outputs are the vertex's own followed by those inherited
    from its vertex groups. Edge id lists and additional input/output
    lists are omitted when empty; userPayloadAsText is always present
    and None when the processor has no payload.

    Raises:
        DescriptorSerializationError: If any attached payload cannot be rendered
    """
    try:
        record: dict[str, Any] = {
            VERTEX_NAME_KEY: vertex.name,
            PROCESSOR_CLASS_KEY: vertex.processor.class_name,
            USER_PAYLOAD_AS_TEXT: extractor.payload_as_text(vertex.processor),
        }

        in_edge_ids = expanded.in_edge_ids(vertex.name)
        if in_edge_ids:
            record[IN_EDGE_IDS_KEY] = in_edge_ids
        out_edge_ids = expanded.out_edge_ids(vertex.name)
        if out_edge_ids:
            record[OUT_EDGE_IDS_KEY] = out_edge_ids

        if vertex.data_sources:
            record[ADDITIONAL_INPUTS_KEY] = [extractor.input_record(root_input) for root_input in vertex.data_sources]

        outputs = (*vertex.data_sinks, *expanded.group_outputs_for(vertex.name))
        if outputs:
            record[ADDITIONAL_OUTPUTS_KEY] = [extractor.output_record(root_output) for root_output in outputs]
    except DescriptorSerializationError as e:
        raise e.with_context(f"vertex '{vertex.name}'") from e

    return cast(VertexRecord, record)
