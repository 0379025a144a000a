"""
Thin JSON codec over pydantic.

Trees are plain JSON-compatible Python values (dict, list, str, int,
float, bool, None). Binding a tree to a type goes through a cached
``TypeAdapter`` so any type pydantic understands can be a target.
"""

from __future__ import annotations

from functools import lru_cache
from typing import IO, Any, Callable, Optional, Union

import pydantic_core
from pydantic import TypeAdapter

from .config import DEFAULT_OPTIONS, ConversionOptions
from .errors import HalParseError


def parse_json(text: Union[str, bytes, bytearray]) -> Any:
    """Parse JSON text into a tree; malformed input raises HalParseError."""
    try:
        return pydantic_core.from_json(text)
    except ValueError as exc:
        raise HalParseError(f"Malformed JSON: {exc}") from exc


def load_json(stream: IO[Any]) -> Any:
    """Read the remainder of *stream* (text or binary) and parse it."""
    return parse_json(stream.read())


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def adapter_for(target: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target)
    except TypeError:
        # unhashable annotation, e.g. Annotated with a dict payload
        return TypeAdapter(target)


def apply_naming(value: Any, transform: Callable[[str], str]) -> Any:
    """Rename object keys recursively; "_"-prefixed keys and subtrees stay verbatim."""
    if isinstance(value, dict):
        renamed = {}
        for key, item in value.items():
            if isinstance(key, str) and key.startswith("_"):
                renamed[key] = item
            else:
                renamed[transform(key)] = apply_naming(item, transform)
        return renamed
    if isinstance(value, list):
        return [apply_naming(item, transform) for item in value]
    return value


def bind(value: Any, target: Any, options: Optional[ConversionOptions] = None) -> Any:
    """
    Bind a JSON tree to *target* under *options*.

    Validation runs in JSON mode, so strict binding still accepts the
    string forms JSON uses for datetimes, UUIDs, enums and the like.
    Raises pydantic.ValidationError when the tree does not fit the target.
    """
    options = options or DEFAULT_OPTIONS
    transform = options.key_transform
    if transform is not None:
        value = apply_naming(value, transform)
    return adapter_for(target).validate_json(
        pydantic_core.to_json(value),
        strict=options.strict,
        context=dict(options.context) if options.context is not None else None,
    )


def dump_python(value: Any, annotation: Any = None) -> Any:
    """Serialize a HAL value (or anything pydantic knows) to a JSON tree."""
    return adapter_for(annotation or type(value)).dump_python(
        value, mode="json", by_alias=True
    )


def dump_json(value: Any, annotation: Any = None) -> str:
    return (
        adapter_for(annotation or type(value))
        .dump_json(value, by_alias=True)
        .decode("utf-8")
    )


__all__ = [
    "parse_json",
    "load_json",
    "bind",
    "apply_naming",
    "adapter_for",
    "dump_python",
    "dump_json",
]
