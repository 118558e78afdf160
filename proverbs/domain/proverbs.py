"""Domain helpers for proverb records and identifier assignment."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

RESERVED_FIELDS = ("id", "text")
SCALAR_TYPES = (str, int, float, bool, type(None))


class InvalidProverbError(ValueError):
    """Raised when a mapping does not have the shape of a proverb record."""


@dataclass
class Proverb:
    id: int
    text: str
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "text": self.text}
        data.update(self.extra)
        return data

    def copy(self) -> "Proverb":
        return Proverb(self.id, self.text, dict(self.extra))

    @classmethod
    def from_dict(cls, data: Any) -> "Proverb":
        """Build a record from its JSON form, rejecting anything off-shape."""
        if not isinstance(data, Mapping):
            raise InvalidProverbError(f"expected an object, got {type(data).__name__}")
        proverb_id = data.get("id")
        # bool is an int subclass; true/false are not identifiers
        if isinstance(proverb_id, bool) or not isinstance(proverb_id, int):
            raise InvalidProverbError(f"invalid id: {proverb_id!r}")
        text = data.get("text")
        if not isinstance(text, str):
            raise InvalidProverbError(f"proverb {proverb_id}: text must be a string")
        return cls(proverb_id, text, clean_extra(data))


def clean_extra(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return the opaque scalar fields of ``data``, minus id/text."""
    extra: dict[str, Any] = {}
    for key, value in data.items():
        if key in RESERVED_FIELDS:
            continue
        if not isinstance(value, SCALAR_TYPES):
            raise InvalidProverbError(f"field {key!r} must be a scalar")
        extra[key] = value
    return extra


def next_identifier(proverbs: Iterable[Proverb]) -> int:
    """One more than the highest id present, or 1 for an empty collection."""
    return max((p.id for p in proverbs), default=0) + 1
