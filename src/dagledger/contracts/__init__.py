"""Shared contracts for the graph description and the history record.

This package is a LEAF MODULE with no outbound dependencies to core.

Import patterns:
    from dagledger.contracts import GraphDescription, Vertex, DataMovementType
"""

from dagledger.contracts.descriptors import (
    DataSinkDescriptor,
    DataSourceDescriptor,
    Descriptor,
    EdgeManagerPluginDescriptor,
    InputDescriptor,
    InputInitializerDescriptor,
    OutputCommitterDescriptor,
    OutputDescriptor,
    ProcessorDescriptor,
)
from dagledger.contracts.enums import (
    DataMovementType,
    DataSourceType,
    GroupEdgeDirection,
    SchedulingType,
)
from dagledger.contracts.errors import (
    ConversionError,
    DescriptorSerializationError,
    GraphValidationError,
    StructuralReferenceError,
)
from dagledger.contracts.graph import (
    Edge,
    EdgeProperty,
    GraphDescription,
    GroupEdge,
    RootInput,
    RootOutput,
    Vertex,
    VertexGroup,
)
from dagledger.contracts.records import (
    AdditionalIORecord,
    EdgeRecord,
    HistoryMap,
    MergedInputRecord,
    VertexGroupRecord,
    VertexRecord,
)
from dagledger.contracts.types import EdgeID, GroupName, VertexName

__all__ = [
    # Descriptors
    "DataSinkDescriptor",
    "DataSourceDescriptor",
    "Descriptor",
    "EdgeManagerPluginDescriptor",
    "InputDescriptor",
    "InputInitializerDescriptor",
    "OutputCommitterDescriptor",
    "OutputDescriptor",
    "ProcessorDescriptor",
    # Enums
    "DataMovementType",
    "DataSourceType",
    "GroupEdgeDirection",
    "SchedulingType",
    # Errors
    "ConversionError",
    "DescriptorSerializationError",
    "GraphValidationError",
    "StructuralReferenceError",
    # Graph description
    "Edge",
    "EdgeProperty",
    "GraphDescription",
    "GroupEdge",
    "RootInput",
    "RootOutput",
    "Vertex",
    "VertexGroup",
    # History records
    "AdditionalIORecord",
    "EdgeRecord",
    "HistoryMap",
    "MergedInputRecord",
    "VertexGroupRecord",
    "VertexRecord",
    # Types
    "EdgeID",
    "GroupName",
    "VertexName",
]
