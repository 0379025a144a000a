from __future__ import annotations

from typing import Any, NamedTuple, Optional, Tuple

from .cardinality import Cardinality
from .errors import CardinalityError
from .links import Link, LinkCollection


class TryGetResult(NamedTuple):
    """
    Outcome of a non-raising lookup. Unpacks as ``found, value`` and is
    truthy only when something was found.
    """

    found: bool
    value: Any = None

    def __bool__(self) -> bool:
        return self.found


NOT_FOUND = TryGetResult(False, None)


class LinkToken:
    """
    A relation name paired with the collection stored for it.

    Tokens are views built on demand; they reference the collection rather
    than copying it. Two tokens are equal when they share a relation name
    and the very same collection object.
    """

    __slots__ = ("_rel", "_collection")

    def __init__(self, rel: str, collection: Optional[LinkCollection]):
        if not isinstance(rel, str):
            raise TypeError(f"rel must be a str, got {type(rel).__name__}")
        self._rel = rel
        self._collection = collection

    @property
    def rel(self) -> str:
        return self._rel

    @property
    def cardinality(self) -> Cardinality:
        if self._collection is None:
            return Cardinality.PLURAL
        return self._collection.cardinality

    def to_single(self) -> Link:
        if self.cardinality is not Cardinality.SINGULAR:
            raise CardinalityError(
                rel=self._rel, expected=Cardinality.SINGULAR, actual=self.cardinality
            )
        return self._collection[0]

    def to_many(self) -> Tuple[Link, ...]:
        if self.cardinality is not Cardinality.PLURAL:
            raise CardinalityError(
                rel=self._rel, expected=Cardinality.PLURAL, actual=self.cardinality
            )
        if not self._collection:
            return ()
        return tuple(self._collection)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkToken):
            return NotImplemented
        return self._collection is other._collection and self._rel == other._rel

    def __hash__(self) -> int:
        return hash((id(self._collection), self._rel))

    def __str__(self) -> str:
        return f"{self._rel}: {self.cardinality}"

    def __repr__(self) -> str:
        return f"LinkToken({self._rel!r}, {self.cardinality})"


__all__ = ["LinkToken", "TryGetResult", "NOT_FOUND"]
