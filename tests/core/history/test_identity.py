# tests/core/history/test_identity.py
"""Tests for run-local edge identifiers."""

from dagledger.core.history.identity import EdgeIdAssigner


class TestEdgeIdAssigner:
    def test_ids_are_unique_and_sequential(self) -> None:
        assigner = EdgeIdAssigner()

        ids = [assigner.next_id() for _ in range(100)]

        assert len(set(ids)) == 100
        assert ids[:3] == ["1", "2", "3"]
        assert ids[-1] == "100"

    def test_assigners_are_independent(self) -> None:
        first = EdgeIdAssigner()
        second = EdgeIdAssigner()

        first.next_id()
        first.next_id()

        assert second.next_id() == "1"
        assert first.next_id() == "3"
