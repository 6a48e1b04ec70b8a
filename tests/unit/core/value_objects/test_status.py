"""
Tests unitaires pour les vocabulaires de statut.
"""

import pytest

from kars.core.value_objects import (
    ReadableKind,
    ReadStatus,
    WatchStatus,
    parse_read_status,
    parse_watch_status,
)


class TestWireValues:
    """Les valeurs sont les chaines snake_case du fil et de la base."""

    def test_watch_values(self) -> None:
        assert [s.value for s in WatchStatus] == [
            "watching", "plan_to_watch", "completed", "on_hold", "dropped",
        ]

    def test_read_values(self) -> None:
        assert [s.value for s in ReadStatus] == [
            "reading", "plan_to_read", "completed", "on_hold", "dropped",
        ]

    def test_readable_kind_labels(self) -> None:
        assert ReadableKind.WEB_NOVEL.label == "Web Novel"
        assert ReadableKind.MANHWA.label == "Manhwa"

    def test_status_labels(self) -> None:
        assert WatchStatus.PLAN_TO_WATCH.label == "Plan to Watch"
        assert ReadStatus.ON_HOLD.label == "On Hold"


class TestParseStatus:
    """Tests pour parse_watch_status et parse_read_status."""

    @pytest.mark.parametrize("status", list(WatchStatus))
    def test_watch_status_round_trip(self, status: WatchStatus) -> None:
        assert parse_watch_status(status.value) is status

    @pytest.mark.parametrize("status", list(ReadStatus))
    def test_read_status_round_trip(self, status: ReadStatus) -> None:
        assert parse_read_status(status.value) is status

    def test_cross_vocabulary_is_accepted(self) -> None:
        """reading <-> watching et plan_to_read <-> plan_to_watch."""
        assert parse_watch_status("reading") is WatchStatus.WATCHING
        assert parse_watch_status("plan_to_read") is WatchStatus.PLAN_TO_WATCH
        assert parse_read_status("watching") is ReadStatus.READING
        assert parse_read_status("plan_to_watch") is ReadStatus.PLAN_TO_READ

    @pytest.mark.parametrize("value", ["", "binge", "COMPLETED", None])
    def test_unknown_falls_back_to_plan(self, value) -> None:
        """Un statut inconnu n'est pas une erreur : repli sur l'etat plan."""
        assert parse_watch_status(value) is WatchStatus.PLAN_TO_WATCH
        assert parse_read_status(value) is ReadStatus.PLAN_TO_READ

    def test_equivalence_tables_are_inverse(self) -> None:
        for status in WatchStatus:
            assert status.as_read_status().as_watch_status() is status
