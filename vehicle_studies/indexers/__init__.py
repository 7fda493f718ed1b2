"""Indexer exercises."""

from vehicle_studies.indexers.notebooks import NoteBooks

__all__ = ["NoteBooks"]
