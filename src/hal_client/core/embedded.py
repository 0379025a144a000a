"""
The ``_embedded`` section of a HAL resource.

Embedded resources are kept as raw JSON trees and only bound to a type
when a caller asks for one, using whatever conversion options it supplies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Type, TypeVar, overload

from pydantic import GetCoreSchemaHandler, ValidationError
from pydantic_core import core_schema

from . import codec
from .config import ConversionOptions
from .errors import (
    EmbeddedConversionError,
    InvalidRelationError,
    RelationNotFoundError,
    type_name,
)
from .links_dictionary import Rel, relation_key
from .observability import log_event
from .tokens import NOT_FOUND, TryGetResult

log = logging.getLogger("hal_client.embedded")

T = TypeVar("T")


class EmbeddedDictionary(Mapping):
    """Ordered, read-oriented mapping of relation name to a raw JSON tree."""

    __slots__ = ("_embedded",)

    def __init__(self, embedded: Optional[Mapping[str, Any]] = None):
        self._embedded: Dict[str, Any] = {}
        if embedded is not None:
            for rel, value in embedded.items():
                self.add(rel, value)

    def __getitem__(self, rel: Rel) -> Any:
        key = relation_key(rel)
        try:
            return self._embedded[key]
        except KeyError:
            raise RelationNotFoundError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._embedded)

    def __len__(self) -> int:
        return len(self._embedded)

    def __contains__(self, rel: object) -> bool:
        return relation_key(rel) in self._embedded  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"EmbeddedDictionary({list(self._embedded)!r})"

    @overload
    def get_as(
        self, rel: Rel, target: Type[T], options: Optional[ConversionOptions] = None
    ) -> T: ...

    @overload
    def get_as(
        self, rel: Rel, target: Any, options: Optional[ConversionOptions] = None
    ) -> Any: ...

    def get_as(self, rel, target, options=None):
        """
        Bind the embedded tree at *rel* to *target*.

        A missing relation raises RelationNotFoundError. A tree that cannot
        be bound raises EmbeddedConversionError whether the tree is
        malformed or simply the wrong shape; the pydantic error is chained.
        """
        tree = self[rel]
        try:
            return codec.bind(tree, target, options)
        except ValidationError as exc:
            raise EmbeddedConversionError(
                rel=relation_key(rel), target=target
            ) from exc

    def try_get_as(
        self, rel: Rel, target: Any, options: Optional[ConversionOptions] = None
    ) -> TryGetResult:
        """Non-raising get_as: found=False when absent or when binding fails."""
        key = relation_key(rel)
        if key not in self._embedded:
            return NOT_FOUND
        try:
            value = codec.bind(self._embedded[key], target, options)
        except ValidationError as exc:
            log_event(
                "embedded_conversion_failed",
                logger=log,
                rel=key,
                target=type_name(target),
                count=exc.error_count(),
            )
            return NOT_FOUND
        return TryGetResult(True, value)

    def add(self, rel: Rel, value: Any) -> None:
        key = relation_key(rel)
        if key in self._embedded:
            raise InvalidRelationError(
                f"The embedded relation '{key}' already exists."
            )
        self._embedded[key] = value

    def remove(self, rel: Rel) -> bool:
        key = relation_key(rel)
        if key not in self._embedded:
            return False
        del self._embedded[key]
        return True

    def to_wire(self) -> Dict[str, Any]:
        return dict(self._embedded)

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
            cls,
            core_schema.dict_schema(core_schema.str_schema(), core_schema.any_schema()),
        )
        return core_schema.no_info_wrap_validator_function(
            cls._passthrough,
            from_mapping,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_wire()
            ),
        )


__all__ = ["EmbeddedDictionary"]
