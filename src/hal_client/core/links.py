"""
HAL link objects and the single-vs-array link collection.

A relation in ``_links`` is either one link object or an array of them.
The shape seen on the wire is kept as the collection's cardinality, so an
array with one element stays an array when written back out.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import (
    Annotated,
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Union,
    overload,
)

import httpx
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    GetCoreSchemaHandler,
    PlainSerializer,
)
from pydantic_core import core_schema
from uritemplate import URITemplate

from . import templates
from .cardinality import Cardinality
from .errors import LinkNotTemplatedError, LinkTemplatedError


def _coerce_url(value: Any) -> Any:
    return httpx.URL(value) if isinstance(value, str) else value


URL = Annotated[
    httpx.URL,
    BeforeValidator(_coerce_url),
    PlainSerializer(str, return_type=str),
]


class LinkBase(BaseModel):
    """Attributes shared by every kind of link; read-only once built."""

    type: Optional[str] = None
    deprecation: Optional[str] = None
    name: Optional[str] = None
    profile: Optional[str] = None
    title: Optional[str] = None
    href_lang: Optional[str] = Field(default=None, alias="hreflang")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def _attributes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in LinkBase.model_fields}

    def to_wire(self) -> Dict[str, Any]:
        """The link as a HAL link object, unset members left out."""
        wire = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not wire.get("templated", False):
            wire.pop("templated", None)
        return wire


class Link(LinkBase):
    """
    One HAL link object.

    ``raw_href`` is kept exactly as received. The concrete address
    (``href``) and the URI template (``templated_href``) are derived from
    it on first use and cached; which of the two is available depends on
    ``is_templated``.
    """

    raw_href: Optional[str] = Field(default=None, alias="href")
    is_templated: bool = Field(default=False, alias="templated")

    @cached_property
    def href(self) -> httpx.URL:
        if self.is_templated:
            raise LinkTemplatedError()
        return httpx.URL(self.raw_href or "")

    @cached_property
    def templated_href(self) -> URITemplate:
        if not self.is_templated:
            raise LinkNotTemplatedError()
        return URITemplate(self.raw_href or "")

    @property
    def variable_names(self) -> frozenset:
        if not self.is_templated:
            return frozenset()
        return frozenset(self.templated_href.variable_names)

    def resolve_href(
        self, parameters: Optional[Mapping[str, Any]] = None, /, **values: Any
    ) -> httpx.URL:
        """
        Concrete address for this link.

        Untemplated links return ``href`` and ignore any parameters.
        Templated links are expanded against *parameters* and/or keyword
        *values* (keywords win on overlap).
        """
        if not self.is_templated:
            return self.href
        merged = templates.collect_parameters(parameters, values)
        return templates.expand(self.templated_href, merged)

    def to_self_link(self) -> "SelfLink":
        """Copy into a SelfLink. Self links are never templates."""
        if self.is_templated:
            raise LinkTemplatedError(
                "A templated link cannot be used as a self link."
            )
        return SelfLink(href=self.href, **self._attributes())

    def __repr__(self) -> str:
        flag = ", templated" if self.is_templated else ""
        return f"Link({self.raw_href!r}{flag})"


class SelfLink(LinkBase):
    """The resource's own address: always concrete, never templated."""

    href: URL

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def is_templated(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"SelfLink({str(self.href)!r})"


def _wire_shape(value: Any) -> Optional[str]:
    if isinstance(value, LinkCollection):
        return "instance"
    if isinstance(value, (dict, Link)):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return None


class LinkCollection(Sequence):
    """
    Read-only sequence of links tagged with the cardinality of its source.

    ``LinkCollection(link)`` is SINGULAR with that one link;
    ``LinkCollection([...])`` is PLURAL whatever its length, empty included.
    """

    __slots__ = ("_links", "_cardinality")

    def __init__(self, links: Union[Link, List[Link], tuple]):
        if isinstance(links, Link):
            self._links: tuple = (links,)
            self._cardinality = Cardinality.SINGULAR
        elif isinstance(links, (list, tuple)):
            for item in links:
                if not isinstance(item, Link):
                    raise TypeError(
                        "LinkCollection items must be Link, "
                        f"got {type(item).__name__}"
                    )
            self._links = tuple(links)
            self._cardinality = Cardinality.PLURAL
        else:
            raise TypeError(
                "LinkCollection needs a Link or a list of Links, "
                f"got {type(links).__name__}"
            )

    @property
    def cardinality(self) -> Cardinality:
        return self._cardinality

    @overload
    def __getitem__(self, index: int) -> Link: ...

    @overload
    def __getitem__(self, index: slice) -> tuple: ...

    def __getitem__(self, index):
        return self._links[index]

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Link]:
        return iter(self._links)

    def __repr__(self) -> str:
        return f"LinkCollection({self._cardinality}, {list(self._links)!r})"

    def to_wire(self) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
        """One JSON object when SINGULAR, a JSON array when PLURAL."""
        if self._cardinality is Cardinality.SINGULAR:
            return self._links[0].to_wire()
        return [link.to_wire() for link in self._links]

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        link_schema = handler.generate_schema(Link)
        return core_schema.tagged_union_schema(
            choices={
                "instance": core_schema.is_instance_schema(cls),
                "object": core_schema.no_info_after_validator_function(
                    cls, link_schema
                ),
                "array": core_schema.no_info_after_validator_function(
                    cls, core_schema.list_schema(link_schema)
                ),
            },
            discriminator=_wire_shape,
            custom_error_type="hal_link_collection",
            custom_error_message=(
                "The provided value could not be converted into a HAL link "
                "or a collection of HAL links."
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_wire()
            ),
        )


__all__ = ["LinkBase", "Link", "SelfLink", "LinkCollection", "URL"]
