"""Typed conversion failures.

Every failure of a conversion is raised synchronously as a subclass of
ConversionError. No partial history record is ever returned alongside one.
"""


class ConversionError(Exception):
    """Base class for failures converting a graph description to history."""


class GraphValidationError(ConversionError, ValueError):
    """Raised when the graph description violates a structural invariant.

    Examples: duplicate vertex names, a vertex group with fewer than two
    members, a vertex sharing its name with a vertex group.
    """


class StructuralReferenceError(GraphValidationError):
    """Raised when an edge, group edge, or group membership names something absent.

    Attributes:
        referrer: Human-readable description of what holds the reference
        missing: The name that could not be resolved
    """

    def __init__(self, referrer: str, missing: str, *, kind: str = "vertex") -> None:
        self.referrer = referrer
        self.missing = missing
        super().__init__(f"{referrer} references unknown {kind} '{missing}'")


class DescriptorSerializationError(ConversionError):
    """Raised when a descriptor's user payload cannot be rendered to history text.

    Attributes:
        descriptor_class: Class name declared by the failing descriptor
        context: Where the descriptor is attached (vertex, edge, group), once known
    """

    def __init__(self, descriptor_class: str, reason: str, *, context: str | None = None) -> None:
        self.descriptor_class = descriptor_class
        self.reason = reason
        self.context = context
        where = f" on {context}" if context is not None else ""
        super().__init__(f"Cannot render user payload of '{descriptor_class}'{where}: {reason}")

    def with_context(self, context: str) -> "DescriptorSerializationError":
        """Return a copy of this error annotated with where the descriptor is attached."""
        return DescriptorSerializationError(self.descriptor_class, self.reason, context=context)
