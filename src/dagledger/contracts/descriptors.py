"""Entity descriptors attached to vertices, edges, and vertex groups.

Each descriptor names an implementation class and optionally carries its
configuration: either as an opaque ``user_payload`` mapping or as an
explicit history ``text``. All kinds satisfy the Descriptor protocol; they
deliberately do not share a base class so that a processor can never be
passed where an output is expected.

Descriptors are frozen after construction. ``user_payload`` is stored as a
read-only mapping so a shared descriptor cannot be altered through one of
its attachment points.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Descriptor(Protocol):
    """Capability shared by every descriptor kind.

    class_name: Fully qualified implementation class
    user_payload: Serialisable configuration, or None if none was set
    text: Explicit history text, or None to derive it from user_payload
    """

    @property
    def class_name(self) -> str: ...

    @property
    def user_payload(self) -> Mapping[str, Any] | None: ...

    @property
    def text(self) -> str | None: ...


def _check_descriptor(descriptor: object, payload: Mapping[str, Any] | None) -> None:
    if not descriptor.class_name:  # type: ignore[attr-defined]
        raise ValueError(f"{type(descriptor).__name__} requires a non-empty class_name")
    if payload is not None and not isinstance(payload, MappingProxyType):
        object.__setattr__(descriptor, "user_payload", MappingProxyType(dict(payload)))


@dataclass(frozen=True, slots=True)
class ProcessorDescriptor:
    """Processing logic run by every task of a vertex."""

    class_name: str
    user_payload: Mapping[str, Any] | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        _check_descriptor(self, self.user_payload)


@dataclass(frozen=True, slots=True)
class InputDescriptor:
    """Reader side of an edge, or a vertex's additional input."""

    class_name: str
    user_payload: Mapping[str, Any] | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        _check_descriptor(self, self.user_payload)


@dataclass(frozen=True, slots=True)
class OutputDescriptor:
    """Writer side of an edge, or a vertex's additional output."""

    class_name: str
    user_payload: Mapping[str, Any] | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        _check_descriptor(self, self.user_payload)


@dataclass(frozen=True, slots=True)
class OutputCommitterDescriptor:
    """Commits the results of an additional output once the graph succeeds."""

    class_name: str
    user_payload: Mapping[str, Any] | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        _check_descriptor(self, self.user_payload)


@dataclass(frozen=True, slots=True)
class InputInitializerDescriptor:
    """Computes splits or other setup for an additional input before it is read."""

    class_name: str
    user_payload: Mapping[str, Any] | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        _check_descriptor(self, self.user_payload)


@dataclass(frozen=True, slots=True)
class EdgeManagerPluginDescriptor:
    """Routing plugin for an edge with CUSTOM data movement."""

    class_name: str
    user_payload: Mapping[str, Any] | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        _check_descriptor(self, self.user_payload)


@dataclass(frozen=True, slots=True)
class DataSourceDescriptor:
    """An additional input together with its optional initializer."""

    input: InputDescriptor
    initializer: InputInitializerDescriptor | None = None


@dataclass(frozen=True, slots=True)
class DataSinkDescriptor:
    """An additional output together with its optional committer."""

    output: OutputDescriptor
    committer: OutputCommitterDescriptor | None = None
