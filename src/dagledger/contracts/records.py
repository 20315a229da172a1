"""TypedDict schemas for the history record.

These are the wire contract with the history service: key names are
fixed and camelCase. Keys marked NotRequired are omitted, never set to an
empty container, when there is nothing to report.

Functional syntax is used because "class" is a reserved word.
"""

from typing import NotRequired, TypedDict

AdditionalIORecord = TypedDict(
    "AdditionalIORecord",
    {
        "name": str,
        "class": str,
        "userPayloadAsText": NotRequired[str],
        "initializer": NotRequired[str],
    },
)

MergedInputRecord = TypedDict(
    "MergedInputRecord",
    {
        "destinationVertexName": str,
        "class": str,
        "userPayloadAsText": NotRequired[str],
    },
)

VertexRecord = TypedDict(
    "VertexRecord",
    {
        "vertexName": str,
        "processorClass": str,
        "userPayloadAsText": str | None,
        "inEdgeIds": NotRequired[list[str]],
        "outEdgeIds": NotRequired[list[str]],
        "additionalInputs": NotRequired[list[AdditionalIORecord]],
        "additionalOutputs": NotRequired[list[AdditionalIORecord]],
    },
)

EdgeRecord = TypedDict(
    "EdgeRecord",
    {
        "edgeId": str,
        "inputVertexName": str,
        "outputVertexName": str,
        "dataMovementType": str,
        "dataSourceType": str,
        "schedulingType": str,
        "edgeSourceClass": str,
        "edgeDestinationClass": str,
        "outputUserPayloadAsText": NotRequired[str],
        "inputUserPayloadAsText": NotRequired[str],
        "edgeManagerClass": NotRequired[str],
    },
)

VertexGroupRecord = TypedDict(
    "VertexGroupRecord",
    {
        "groupName": str,
        "groupMembers": list[str],
        "outputs": list[AdditionalIORecord],
        "edgeMergedInputs": list[MergedInputRecord],
    },
)

HistoryMap = TypedDict(
    "HistoryMap",
    {
        "dagName": str,
        "version": int,
        "vertices": list[VertexRecord],
        "edges": list[EdgeRecord],
        "vertexGroups": list[VertexGroupRecord],
        "dagInfo": NotRequired[str],
    },
)
