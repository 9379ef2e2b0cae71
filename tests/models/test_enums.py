"""
Tests for the entry type/status lookup tables.
"""

import pytest

from finance_tracker.models.enums import (
    EntryType,
    EntryStatus,
    entry_type_from_name,
    entry_type_to_name,
    entry_status_from_name,
    entry_status_to_name,
    parse_entry_type,
    parse_entry_status,
)


class TestEntryTypeNames:

    @pytest.mark.parametrize("kind", list(EntryType))
    def test_name_round_trips(self, kind):
        assert entry_type_from_name(entry_type_to_name(kind)) is kind

    @pytest.mark.parametrize("text", ["income", " INCOME ", "Income"])
    def test_stored_lookup_is_exact(self, text):
        with pytest.raises(ValueError, match="Unknown entry type"):
            entry_type_from_name(text)

    @pytest.mark.parametrize("text", ["RECEITA", "", "INCOMES"])
    def test_unknown_name_rejected(self, text):
        with pytest.raises(ValueError, match="Unknown entry type"):
            entry_type_from_name(text)

    def test_non_text_rejected(self):
        with pytest.raises(ValueError, match="Unknown entry type"):
            entry_type_from_name(None)


class TestParseEntryType:

    def test_parsing_ignores_case_and_spaces(self):
        assert parse_entry_type(" income ") is EntryType.INCOME

    def test_unknown_text_rejected(self):
        with pytest.raises(ValueError, match="Unknown entry type"):
            parse_entry_type("receita")

    def test_non_text_rejected(self):
        with pytest.raises(ValueError, match="Unknown entry type"):
            parse_entry_type(None)


class TestEntryStatusNames:

    @pytest.mark.parametrize("status", list(EntryStatus))
    def test_name_round_trips(self, status):
        assert entry_status_from_name(entry_status_to_name(status)) is status

    def test_unknown_name_rejected(self):
        with pytest.raises(ValueError, match="Unknown entry status"):
            entry_status_from_name("EFETIVADO")

    def test_stored_lookup_is_exact(self):
        with pytest.raises(ValueError, match="Unknown entry status"):
            entry_status_from_name("confirmed")

    def test_parsing_ignores_case(self):
        assert parse_entry_status("confirmed ") is EntryStatus.CONFIRMED

    def test_every_status_has_a_name(self):
        assert {entry_status_to_name(s) for s in EntryStatus} == {
            "PENDING", "CONFIRMED", "CANCELLED",
        }
