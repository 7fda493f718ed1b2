"""Tests for the NoteBooks indexer."""

from __future__ import annotations

import pytest

from vehicle_studies.indexers import NoteBooks


class TestNoteBooks:
    def test_set_and_get(self) -> None:
        notebooks = NoteBooks()
        notebooks[0] = "Introduction to C#"
        notebooks[1] = "Advanced C# Concepts"
        assert notebooks[0] == "Introduction to C#"
        assert notebooks[1] == "Advanced C# Concepts"

    def test_unset_slot_is_none(self) -> None:
        assert NoteBooks()[999] is None

    def test_default_capacity(self) -> None:
        assert len(NoteBooks()) == 1000

    @pytest.mark.parametrize("index", [-1, 1000])
    def test_out_of_range(self, index: int) -> None:
        notebooks = NoteBooks()
        with pytest.raises(IndexError):
            notebooks[index]
        with pytest.raises(IndexError):
            notebooks[index] = "x"

    def test_non_string_value(self) -> None:
        with pytest.raises(TypeError):
            NoteBooks()[0] = 42  # type: ignore[assignment]

    def test_non_integer_index(self) -> None:
        with pytest.raises(TypeError):
            NoteBooks()["0"]  # type: ignore[index]

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            NoteBooks(0)

    def test_from_config(self) -> None:
        notebooks = NoteBooks.from_config({"VEHICLE_STUDIES_NOTEBOOK_CAPACITY": "5"})
        assert len(notebooks) == 5
        with pytest.raises(IndexError):
            notebooks[5]
