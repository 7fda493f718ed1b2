"""NoteBooks — a fixed-capacity collection of notes addressed by index."""

from __future__ import annotations

from typing import Mapping

from vehicle_studies.config import DEFAULT_NOTEBOOK_CAPACITY, notebook_capacity


class NoteBooks:
    """Fixed number of string slots, read and written with ``notebooks[i]``.

    Unset slots read as ``None``.  Negative indices are rejected rather than
    counted from the end.
    """

    def __init__(self, capacity: int = DEFAULT_NOTEBOOK_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._notebooks: list[str | None] = [None] * capacity

    @classmethod
    def from_config(cls, config: Mapping[str, str] | None = None) -> NoteBooks:
        """Create a NoteBooks sized by ``VEHICLE_STUDIES_NOTEBOOK_CAPACITY``."""
        return cls(notebook_capacity(config))

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"NoteBooks indices must be integers, not {type(index).__name__}")
        if not 0 <= index < len(self._notebooks):
            raise IndexError(f"NoteBooks index {index} out of range 0..{len(self._notebooks) - 1}")

    def __getitem__(self, index: int) -> str | None:
        self._check_index(index)
        return self._notebooks[index]

    def __setitem__(self, index: int, value: str) -> None:
        self._check_index(index)
        if not isinstance(value, str):
            raise TypeError(f"NoteBooks values must be str, not {type(value).__name__}")
        self._notebooks[index] = value

    def __len__(self) -> int:
        return len(self._notebooks)
