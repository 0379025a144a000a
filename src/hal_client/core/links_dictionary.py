"""
The ``_links`` section of a HAL resource.

Relations are stored as LinkCollections keyed by relation name; reading
through the mapping interface hands out LinkTokens built on demand over
the stored collections. Relation keys may be plain strings or absolute
``httpx.URL`` values (extension relations), the latter being looked up by
their string form.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple, Union

import httpx
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .cardinality import Cardinality
from .errors import (
    CardinalityError,
    InvalidRelationError,
    LinkTemplatedError,
    RelationNotFoundError,
    SelfRelationError,
)
from .links import Link, LinkCollection, SelfLink
from .observability import log_event
from .tokens import NOT_FOUND, LinkToken, TryGetResult

log = logging.getLogger("hal_client.links")

SELF_REL = "self"

Rel = Union[str, httpx.URL]


def relation_key(rel: Rel) -> str:
    """Validate a relation key and return the string it is stored under."""
    if rel is None:
        raise InvalidRelationError("A link relation is required.")
    if isinstance(rel, httpx.URL):
        if not rel.scheme:
            raise InvalidRelationError(f"The URI '{rel}' is not an absolute URI.")
        return str(rel)
    if isinstance(rel, str):
        return rel
    raise InvalidRelationError(
        f"A link relation must be a str or an absolute httpx.URL, "
        f"got {type(rel).__name__}."
    )


LinkSource = Union[Link, Sequence[Link], LinkCollection]


def _as_collection(links: LinkSource) -> LinkCollection:
    if isinstance(links, LinkCollection):
        return links
    return LinkCollection(links)


class LinksDictionary(Mapping):
    """Ordered, read-oriented mapping of relation name to LinkToken."""

    __slots__ = ("_links",)

    def __init__(self, links: Optional[Mapping[str, Any]] = None):
        self._links: Dict[str, LinkCollection] = {}
        if links is not None:
            for rel, value in links.items():
                self.add(rel, value)

    # --- mapping surface ---------------------------------------------------

    def __getitem__(self, rel: Rel) -> LinkToken:
        key = relation_key(rel)
        try:
            return LinkToken(key, self._links[key])
        except KeyError:
            raise RelationNotFoundError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, rel: object) -> bool:
        return relation_key(rel) in self._links  # type: ignore[arg-type]

    def __repr__(self) -> str:
        body = ", ".join(
            f"{rel!r}: {coll.cardinality}" for rel, coll in self._links.items()
        )
        return f"LinksDictionary({{{body}}})"

    # --- typed accessors ---------------------------------------------------

    def get_cardinality(self, rel: Rel) -> Cardinality:
        return self[rel].cardinality

    def get_single(self, rel: Rel) -> Link:
        return self[rel].to_single()

    def get_many(self, rel: Rel) -> Tuple[Link, ...]:
        return self[rel].to_many()

    def try_get(self, rel: Rel) -> TryGetResult:
        key = relation_key(rel)
        collection = self._links.get(key)
        if collection is None:
            return NOT_FOUND
        return TryGetResult(True, LinkToken(key, collection))

    def try_get_single(self, rel: Rel) -> TryGetResult:
        """Like get_single, but absence and an array both give found=False."""
        found, token = self.try_get(rel)
        if not found:
            return NOT_FOUND
        if token.cardinality is not Cardinality.SINGULAR:
            log_event(
                "link_cardinality_mismatch",
                logger=log,
                rel=token.rel,
                cardinality=token.cardinality,
            )
            return NOT_FOUND
        return TryGetResult(True, token.to_single())

    def try_get_many(self, rel: Rel) -> TryGetResult:
        """Like get_many, but absence and a single object both give found=False."""
        found, token = self.try_get(rel)
        if not found:
            return NOT_FOUND
        if token.cardinality is not Cardinality.PLURAL:
            log_event(
                "link_cardinality_mismatch",
                logger=log,
                rel=token.rel,
                cardinality=token.cardinality,
            )
            return NOT_FOUND
        return TryGetResult(True, token.to_many())

    @property
    def self_link(self) -> SelfLink:
        """
        The resource's own address. The "self" relation must be present,
        a single object, and untemplated; anything else is a SelfRelationError.
        """
        try:
            link = self.get_single(SELF_REL)
        except RelationNotFoundError as exc:
            raise SelfRelationError(SELF_REL, "the relation is missing") from exc
        except CardinalityError as exc:
            raise SelfRelationError(SELF_REL, "the relation is an array") from exc
        try:
            return link.to_self_link()
        except LinkTemplatedError as exc:
            raise SelfRelationError(SELF_REL, "the link is templated") from exc

    # --- population --------------------------------------------------------

    def add(self, rel: Rel, links: LinkSource) -> None:
        """
        Store *links* under *rel*. A single Link is stored SINGULAR, a
        list or tuple PLURAL; a LinkCollection keeps its own cardinality.
        """
        key = relation_key(rel)
        if key in self._links:
            raise InvalidRelationError(f"The link relation '{key}' already exists.")
        self._links[key] = _as_collection(links)

    def remove(self, rel: Rel) -> bool:
        return self._links.pop(relation_key(rel), None) is not None

    # --- wire format -------------------------------------------------------

    def to_wire(self) -> Dict[str, Any]:
        return {rel: coll.to_wire() for rel, coll in self._links.items()}

    @classmethod
    def _passthrough(
        cls, value: Any, handler: core_schema.ValidatorFunctionWrapHandler
    ) -> Any:
        if isinstance(value, cls):
            return value
        return handler(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_mapping = core_schema.no_info_after_validator_function(
            cls, handler.generate_schema(Dict[str, LinkCollection])
        )
        return core_schema.no_info_wrap_validator_function(
            cls._passthrough,
            from_mapping,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_wire()
            ),
        )


__all__ = ["LinksDictionary", "SELF_REL", "relation_key"]
