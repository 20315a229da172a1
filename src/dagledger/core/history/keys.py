# src/dagledger/core/history/keys.py
"""Key names of the history record.

These strings are the wire contract with the history service and must
not change. They mirror the TypedDicts in dagledger.contracts.records.
"""

# Top level
DAG_NAME_KEY = "dagName"
VERSION_KEY = "version"
VERTICES_KEY = "vertices"
EDGES_KEY = "edges"
VERTEX_GROUPS_KEY = "vertexGroups"
DAG_INFO_KEY = "dagInfo"

# Vertex records
VERTEX_NAME_KEY = "vertexName"
PROCESSOR_CLASS_KEY = "processorClass"
IN_EDGE_IDS_KEY = "inEdgeIds"
OUT_EDGE_IDS_KEY = "outEdgeIds"
ADDITIONAL_INPUTS_KEY = "additionalInputs"
ADDITIONAL_OUTPUTS_KEY = "additionalOutputs"

# Additional input/output records (also used by group outputs and merged inputs)
NAME_KEY = "name"
CLASS_KEY = "class"
INITIALIZER_KEY = "initializer"
USER_PAYLOAD_AS_TEXT = "userPayloadAsText"

# Edge records
EDGE_ID_KEY = "edgeId"
INPUT_VERTEX_NAME_KEY = "inputVertexName"
OUTPUT_VERTEX_NAME_KEY = "outputVertexName"
DATA_MOVEMENT_TYPE_KEY = "dataMovementType"
DATA_SOURCE_TYPE_KEY = "dataSourceType"
SCHEDULING_TYPE_KEY = "schedulingType"
EDGE_SOURCE_CLASS_KEY = "edgeSourceClass"
EDGE_DESTINATION_CLASS_KEY = "edgeDestinationClass"
OUTPUT_USER_PAYLOAD_AS_TEXT = "outputUserPayloadAsText"
INPUT_USER_PAYLOAD_AS_TEXT = "inputUserPayloadAsText"
EDGE_MANAGER_CLASS_KEY = "edgeManagerClass"

# Vertex group records
VERTEX_GROUP_NAME_KEY = "groupName"
VERTEX_GROUP_MEMBERS_KEY = "groupMembers"
VERTEX_GROUP_OUTPUTS_KEY = "outputs"
VERTEX_GROUP_EDGE_MERGED_INPUTS_KEY = "edgeMergedInputs"
VERTEX_GROUP_DESTINATION_VERTEX_NAME_KEY = "destinationVertexName"
