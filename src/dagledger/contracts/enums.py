"""Edge semantics enumerations carried into history records.

Values are the label strings the history service expects, so a member's
``value`` is written to the record unchanged.
"""

from enum import StrEnum


class DataMovementType(StrEnum):
    """How data produced by a source task reaches destination tasks.

    Written to history records (edges.dataMovementType).
    """

    ONE_TO_ONE = "ONE_TO_ONE"
    BROADCAST = "BROADCAST"
    SCATTER_GATHER = "SCATTER_GATHER"
    CUSTOM = "CUSTOM"


class DataSourceType(StrEnum):
    """Lifetime of the data produced on an edge.

    Written to history records (edges.dataSourceType).
    """

    PERSISTED = "PERSISTED"
    PERSISTED_RELIABLE = "PERSISTED_RELIABLE"
    EPHEMERAL = "EPHEMERAL"


class SchedulingType(StrEnum):
    """Whether destination tasks may run alongside source tasks.

    Written to history records (edges.schedulingType).
    """

    SEQUENTIAL = "SEQUENTIAL"
    CONCURRENT = "CONCURRENT"


class GroupEdgeDirection(StrEnum):
    """Which endpoint of a group edge is the vertex group.

    Not written to history records; it only steers expansion.
    """

    GROUP_TO_VERTEX = "group_to_vertex"
    VERTEX_TO_GROUP = "vertex_to_group"
