"""In-memory proverb collection (lookups, mutations, identifier assignment)."""

from __future__ import annotations

import threading
from typing import Any, Iterable, List, Optional

from proverbs.domain.proverbs import Proverb, next_identifier


class ProverbError(Exception):
    """Base exception for store operations."""


class ProverbNotFoundError(ProverbError):
    """Raised when no record carries the requested identifier."""

    def __init__(self, proverb_id: int) -> None:
        super().__init__(f"Proverb {proverb_id} not found")
        self.proverb_id = proverb_id


class ProverbStore:
    """
    Ordered collection of proverbs, addressed by identifier.

    The store is the source of truth while the process runs. Every operation
    holds a single lock for its whole duration, so concurrent requests see the
    same results as some sequential ordering of them. Records handed out are
    copies.
    """

    def __init__(self, proverbs: Optional[Iterable[Proverb]] = None) -> None:
        self._proverbs: List[Proverb] = [p.copy() for p in (proverbs or [])]
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._proverbs)

    def _index_of(self, proverb_id: int) -> int:
        for index, proverb in enumerate(self._proverbs):
            if proverb.id == proverb_id:
                return index
        raise ProverbNotFoundError(proverb_id)

    def list(self) -> List[Proverb]:
        with self._lock:
            return [p.copy() for p in self._proverbs]

    def create(self, text: str, extra: Optional[dict[str, Any]] = None) -> Proverb:
        with self._lock:
            proverb = Proverb(next_identifier(self._proverbs), text, dict(extra or {}))
            self._proverbs.append(proverb)
            return proverb.copy()

    def get(self, proverb_id: int) -> Proverb:
        with self._lock:
            return self._proverbs[self._index_of(proverb_id)].copy()

    def update(self, proverb_id: int, text: str, extra: Optional[dict[str, Any]] = None) -> Proverb:
        """Replace the content of a record, keeping its id and position."""
        with self._lock:
            proverb = self._proverbs[self._index_of(proverb_id)]
            proverb.text = text
            proverb.extra = dict(extra or {})
            return proverb.copy()

    def delete(self, proverb_id: int) -> None:
        with self._lock:
            del self._proverbs[self._index_of(proverb_id)]

    def snapshot(self) -> List[Proverb]:
        """Copy of the current sequence, for persistence."""
        return self.list()
