"""
JSON snapshot persistence for the proverb collection.

The snapshot is a single JSON array of objects, each with an integer ``id``,
a string ``text`` and any opaque scalar fields. It is read once when the
process starts and rewritten when it shuts down.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
import json
import os

from proverbs.domain.proverbs import InvalidProverbError, Proverb


class StorageError(Exception):
    """Base exception for snapshot I/O."""


class SnapshotReadError(StorageError):
    """Raised when the snapshot file cannot be opened or read."""


class SnapshotDecodeError(StorageError):
    """Raised when the snapshot is not a JSON array of proverb records."""


class SnapshotWriteError(StorageError):
    """Raised when the snapshot file cannot be created or written."""


def load(path: str | os.PathLike) -> list[Proverb]:
    data_file = Path(path)
    try:
        raw = data_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotReadError(f"cannot read {data_file}: {exc}") from exc
    if not raw.strip():
        return []
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SnapshotDecodeError(f"{data_file} is not valid JSON: {exc}") from exc
    if items is None:
        return []
    if not isinstance(items, list):
        raise SnapshotDecodeError(f"{data_file} must hold a JSON array, got {type(items).__name__}")

    proverbs: list[Proverb] = []
    seen: set[int] = set()
    for index, item in enumerate(items):
        try:
            proverb = Proverb.from_dict(item)
        except InvalidProverbError as exc:
            raise SnapshotDecodeError(f"{data_file} item {index}: {exc}") from exc
        if proverb.id in seen:
            raise SnapshotDecodeError(f"{data_file} item {index}: duplicate id {proverb.id}")
        seen.add(proverb.id)
        proverbs.append(proverb)
    return proverbs


def save(path: str | os.PathLike, proverbs: Iterable[Proverb]) -> None:
    data_file = Path(path)
    payload = json.dumps([p.to_dict() for p in proverbs], ensure_ascii=False, indent=2)
    try:
        data_file.write_text(payload + "\n", encoding="utf-8")
    except OSError as exc:
        raise SnapshotWriteError(f"cannot write {data_file}: {exc}") from exc
