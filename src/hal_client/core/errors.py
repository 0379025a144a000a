from __future__ import annotations

from typing import Any, Optional

from .cardinality import Cardinality


class HalError(Exception):
    """Base error for HAL model failures."""


class InvalidRelationError(HalError, ValueError):
    """Raised before lookup when a relation key is missing or malformed."""


class RelationNotFoundError(HalError, KeyError):
    def __init__(self, rel: str):
        super().__init__(rel)
        self.rel = rel

    def __str__(self) -> str:
        return f"The link relation '{self.rel}' was not found."


class CardinalityError(HalError):
    def __init__(self, *, rel: str, expected: Cardinality, actual: Cardinality):
        if expected is Cardinality.SINGULAR:
            message = f"The link relation '{rel}' is an array, not an object."
        else:
            message = f"The link relation '{rel}' is an object, not an array."
        super().__init__(message)
        self.rel = rel
        self.expected = expected
        self.actual = actual


class LinkTemplatingError(HalError):
    """Templating-state misuse; callers are expected to check is_templated."""


class LinkTemplatedError(LinkTemplatingError):
    def __init__(self, message: str = "") -> None:
        super().__init__(
            message or "This operation is not supported when the link is templated."
        )


class LinkNotTemplatedError(LinkTemplatingError):
    def __init__(self, message: str = "") -> None:
        super().__init__(
            message
            or "This operation is not supported when the link is not templated."
        )


class SelfRelationError(HalError):
    def __init__(self, rel: str, reason: str):
        super().__init__(
            f"The '{rel}' link relation is missing or invalid: {reason}"
        )
        self.rel = rel
        self.reason = reason


class EmbeddedConversionError(HalError):
    def __init__(self, *, rel: str, target: Any):
        self.rel = rel
        self.target = target
        self.target_name = type_name(target)
        super().__init__(
            f"The embedded relation '{rel}' could not be converted to "
            f"{self.target_name}."
        )


class HalParseError(HalError):
    def __init__(self, message: str, *, target: Optional[Any] = None):
        super().__init__(message)
        self.target = target


def type_name(target: Any) -> str:
    if isinstance(target, type):
        return target.__qualname__
    return repr(target)


__all__ = [
    "HalError",
    "InvalidRelationError",
    "RelationNotFoundError",
    "CardinalityError",
    "LinkTemplatingError",
    "LinkTemplatedError",
    "LinkNotTemplatedError",
    "SelfRelationError",
    "EmbeddedConversionError",
    "HalParseError",
    "type_name",
]
