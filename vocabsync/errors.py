from __future__ import annotations


class VocabSyncError(Exception):
    """Base error for the vocabsync package."""


class MatchNotFound(VocabSyncError, LookupError):
    """A manual search found nothing. Carries near-miss glossary lines."""

    def __init__(self, term: str, suggestions: list[str] | None = None):
        self.term = term
        self.suggestions = list(suggestions or [])
        super().__init__(f"no match for {term!r}")


class NoteStoreError(VocabSyncError):
    pass
