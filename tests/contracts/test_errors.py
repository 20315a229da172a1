# tests/contracts/test_errors.py
"""Tests for the conversion error taxonomy."""

from dagledger.contracts import (
    ConversionError,
    DescriptorSerializationError,
    GraphValidationError,
    StructuralReferenceError,
)


class TestErrorTaxonomy:
    def test_all_errors_are_conversion_errors(self) -> None:
        for error_type in (DescriptorSerializationError, GraphValidationError, StructuralReferenceError):
            assert issubclass(error_type, ConversionError)

    def test_structural_reference_message(self) -> None:
        error = StructuralReferenceError("Edge a -> b", "b")

        assert str(error) == "Edge a -> b references unknown vertex 'b'"
        assert error.referrer == "Edge a -> b"
        assert error.missing == "b"

    def test_serialization_error_with_context(self) -> None:
        error = DescriptorSerializationError("org.example.P", "bad float")

        annotated = error.with_context("vertex 'v'")

        assert error.context is None
        assert annotated.context == "vertex 'v'"
        assert annotated.descriptor_class == "org.example.P"
        assert str(annotated) == "Cannot render user payload of 'org.example.P' on vertex 'v': bad float"
