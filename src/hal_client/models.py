from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.codec import load_json
from .core.config import ConversionOptions
from .core.embedded import EmbeddedDictionary
from .core.errors import HalParseError
from .core.links import SelfLink
from .core.links_dictionary import LinksDictionary, Rel
from .core.observability import log_event

log = logging.getLogger("hal_client.models")

M = TypeVar("M", bound="HalResource")


class HalResource(BaseModel):
    """
    Base model for HAL+JSON payloads.

    ``_links`` and ``_embedded`` are parsed into their typed dictionaries;
    subclasses declare the resource's own state fields next to them.
    """

    links: LinksDictionary = Field(default_factory=LinksDictionary, alias="_links")
    embedded: EmbeddedDictionary = Field(
        default_factory=EmbeddedDictionary, alias="_embedded"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def self_link(self) -> SelfLink:
        return self.links.self_link

    def link_href(self, rel: Rel) -> Optional[str]:
        """href of a single, untemplated relation, or None."""
        found, link = self.links.try_get_single(rel)
        if not found or link.is_templated:
            return None
        return str(link.href)

    def embedded_as(
        self, rel: Rel, target: Any, options: Optional[ConversionOptions] = None
    ) -> Any:
        return self.embedded.get_as(rel, target, options)


def parse_resource(
    text: Union[str, bytes, bytearray], model: Type[M] = HalResource  # type: ignore[assignment]
) -> M:
    """
    Parse a HAL document into *model*.
    Raises HalParseError if the text is not JSON or does not fit the model.
    """
    try:
        resource = model.model_validate_json(text)
    except ValidationError as exc:
        raise HalParseError(
            f"Document did not match model {model.__name__}: {exc}", target=model
        ) from exc
    log_event(
        "resource_parsed",
        logger=log,
        model=model.__name__,
        count=len(resource.links),
    )
    return resource


def load_resource(stream: Any, model: Type[M] = HalResource) -> M:  # type: ignore[assignment]
    """Read a HAL document from a text or binary stream into *model*."""
    tree = load_json(stream)
    try:
        return model.model_validate(tree)
    except ValidationError as exc:
        raise HalParseError(
            f"Document did not match model {model.__name__}: {exc}", target=model
        ) from exc


__all__ = ["HalResource", "parse_resource", "load_resource"]
