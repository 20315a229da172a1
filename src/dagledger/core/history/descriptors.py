# src/dagledger/core/history/descriptors.py
"""Descriptor extraction: name/class/payload/initializer records.

Every descriptor kind is handled through the Descriptor protocol, so the
same extractor serves processors, edge endpoints, additional inputs and
outputs, committers, initializers and merged inputs.
"""

from __future__ import annotations

from typing import cast

from dagledger.contracts import (
    AdditionalIORecord,
    Descriptor,
    DescriptorSerializationError,
    RootInput,
    RootOutput,
)
from dagledger.core.canonical import canonical_json
from dagledger.core.history.keys import (
    CLASS_KEY,
    INITIALIZER_KEY,
    NAME_KEY,
    USER_PAYLOAD_AS_TEXT,
)


class DescriptorExtractor:
    """Renders descriptors into history records.

    History text rule:
    1. An explicit ``text`` is used verbatim (an empty string stays empty)
    2. Otherwise a set ``user_payload`` is rendered as canonical JSON,
       unless render_user_payloads is False
    3. Otherwise there is no payload text and the key is omitted

    Example:
        extractor = DescriptorExtractor()
        extractor.payload_as_text(ProcessorDescriptor("Tokenizer", text="lower=true"))
        # -> "lower=true"
    """

    def __init__(self, *, render_user_payloads: bool = True) -> None:
        self._render_user_payloads = render_user_payloads

    def payload_as_text(self, descriptor: Descriptor) -> str | None:
        """Return the history text of descriptor, or None if it has none.

        Raises:
            DescriptorSerializationError: If user_payload cannot be rendered
        """
        if descriptor.text is not None:
            return descriptor.text
        if descriptor.user_payload is None or not self._render_user_payloads:
            return None
        try:
            return canonical_json(descriptor.user_payload)
        except (ValueError, TypeError) as e:
            raise DescriptorSerializationError(descriptor.class_name, str(e)) from e

    def record(
        self,
        name: str,
        descriptor: Descriptor,
        *,
        initializer: Descriptor | None = None,
    ) -> AdditionalIORecord:
        """Build a name/class/payload record, adding initializer only when given."""
        record: dict[str, str] = {
            NAME_KEY: name,
            CLASS_KEY: descriptor.class_name,
        }
        text = self.payload_as_text(descriptor)
        if text is not None:
            record[USER_PAYLOAD_AS_TEXT] = text
        if initializer is not None:
            record[INITIALIZER_KEY] = initializer.class_name
        return cast(AdditionalIORecord, record)

    def input_record(self, root_input: RootInput) -> AdditionalIORecord:
        """Record for an additional input. Inputs never report an initializer."""
        return self.record(root_input.name, root_input.descriptor.input)

    def output_record(self, root_output: RootOutput) -> AdditionalIORecord:
        """Record for an additional output; its committer is reported as the initializer."""
        sink = root_output.descriptor
        return self.record(root_output.name, sink.output, initializer=sink.committer)
