"""Prompt-tag text helpers, Levenshtein distances, alignments and edit operations."""

__version__ = "0.1.0"
__all__ = ["text_utils", "types", "sentence", "levenshtein", "levenshtein_align"]