"""Core HAL data model for hal-client (no I/O, no transport)."""

from .cardinality import Cardinality
from .codec import bind, dump_json, dump_python, load_json, parse_json
from .config import (
    DEFAULT_OPTIONS,
    ConversionOptions,
    load_env_config,
    load_log_level,
)
from .embedded import EmbeddedDictionary
from .errors import (
    CardinalityError,
    EmbeddedConversionError,
    HalError,
    HalParseError,
    InvalidRelationError,
    LinkNotTemplatedError,
    LinkTemplatedError,
    LinkTemplatingError,
    RelationNotFoundError,
    SelfRelationError,
)
from .links import Link, LinkBase, LinkCollection, SelfLink
from .links_dictionary import SELF_REL, LinksDictionary, relation_key
from .logging import LogfmtFormatter, setup_logging
from .observability import log_event
from .tokens import LinkToken, TryGetResult

__all__ = [
    # Links
    "Cardinality",
    "Link",
    "LinkBase",
    "SelfLink",
    "LinkCollection",
    "LinkToken",
    "TryGetResult",
    # Dictionaries
    "LinksDictionary",
    "EmbeddedDictionary",
    "SELF_REL",
    "relation_key",
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
    # Codec
    "parse_json",
    "load_json",
    "bind",
    "dump_python",
    "dump_json",
    # Config
    "ConversionOptions",
    "DEFAULT_OPTIONS",
    "load_env_config",
    "load_log_level",
    # Logging
    "LogfmtFormatter",
    "setup_logging",
    "log_event",
]
