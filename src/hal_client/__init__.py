"""hal_client package exports."""

from .core import (
    DEFAULT_OPTIONS,
    SELF_REL,
    Cardinality,
    CardinalityError,
    ConversionOptions,
    EmbeddedConversionError,
    EmbeddedDictionary,
    HalError,
    HalParseError,
    InvalidRelationError,
    Link,
    LinkCollection,
    LinkNotTemplatedError,
    LinksDictionary,
    LinkTemplatedError,
    LinkTemplatingError,
    LinkToken,
    RelationNotFoundError,
    SelfLink,
    SelfRelationError,
    TryGetResult,
    dump_json,
    load_env_config,
    parse_json,
    setup_logging,
)
from .models import HalResource, load_resource, parse_resource

__all__ = [
    # Model
    "HalResource",
    "parse_resource",
    "load_resource",
    "Cardinality",
    "Link",
    "SelfLink",
    "LinkCollection",
    "LinkToken",
    "TryGetResult",
    "LinksDictionary",
    "EmbeddedDictionary",
    "SELF_REL",
    # Exceptions
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
    # Codec / config
    "parse_json",
    "dump_json",
    "ConversionOptions",
    "DEFAULT_OPTIONS",
    "load_env_config",
    "setup_logging",
]
