import io
import json
from pathlib import Path
from typing import List

import pytest
from hal_client import (
    EmbeddedConversionError,
    HalParseError,
    HalResource,
    LinksDictionary,
    load_resource,
    parse_resource,
)
from pydantic import Field


def load_fixture(name: str) -> str:
    p = Path(__file__).parent / "fixtures" / name
    return p.read_text(encoding="utf-8")


class Item(HalResource):
    currency: str
    status: str
    total: float


class OrderList(HalResource):
    currently_processing: int = Field(alias="currentlyProcessing")
    shipped_today: int = Field(alias="shippedToday")


def test_book_parses_with_links_only():
    book = parse_resource(load_fixture("book.json"))

    assert isinstance(book.links, LinksDictionary)
    assert book.self_link.href == "/books/the-way-of-zen"
    assert book.link_href("author") == "/people/alan-watts"
    assert len(book.embedded) == 0


def test_order_parses_state_and_links():
    order = parse_resource(load_fixture("order.json"), Item)

    assert isinstance(order, Item)
    assert order.currency == "USD"
    assert order.status == "shipped"
    assert order.total == pytest.approx(10.20)
    assert order.self_link.href == "/orders/523"
    assert order.link_href("warehouse") == "/warehouse/56"
    assert order.link_href("invoice") == "/invoices/873"


def test_order_list_example():
    orders = parse_resource(load_fixture("orders.json"), OrderList)

    assert orders.currently_processing == 14
    assert orders.shipped_today == 20
    assert orders.link_href("next") == "/orders?page=2"
    # templated and plural relations have no plain href
    assert orders.link_href("ea:find") is None
    assert orders.link_href("ea:admin") is None
    assert orders.link_href("missing") is None

    find = orders.links.get_single("ea:find")
    assert str(find.resolve_href(id=321)) == "/orders?id=321"

    items = orders.embedded_as("ea:order", List[Item])
    assert [item.self_link.href for item in items] == ["/orders/123", "/orders/124"]

    with pytest.raises(EmbeddedConversionError):
        orders.embedded_as("ea:order", Item)


def test_missing_sections_default_to_empty():
    resource = parse_resource("{}")
    assert len(resource.links) == 0
    assert len(resource.embedded) == 0
    assert resource.link_href("self") is None


def test_unknown_state_is_ignored_by_base_model():
    resource = parse_resource(load_fixture("order.json"))
    assert not hasattr(resource, "currency")


def test_round_trip_preserves_wire_shapes():
    text = load_fixture("orders.json")
    orders = parse_resource(text, OrderList)
    assert orders.model_dump(mode="json", by_alias=True) == json.loads(text)


def test_populate_by_field_name():
    resource = HalResource(links=LinksDictionary())
    assert len(resource.links) == 0


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"_links": []}',
        '{"_links": {"self": "/orders/523"}}',
        '{"_links": {"self": 42}}',
        '{"_links": {"self": [42]}}',
        '{"_embedded": []}',
    ],
)
def test_parse_errors(text):
    with pytest.raises(HalParseError) as exc:
        parse_resource(text)
    assert exc.value.target is HalResource


def test_parse_error_for_model_state():
    with pytest.raises(HalParseError) as exc:
        parse_resource(load_fixture("book.json"), Item)
    assert "Item" in str(exc.value)


def test_load_resource_from_text_and_binary_streams():
    text = load_fixture("book.json")

    from_text = load_resource(io.StringIO(text))
    from_bytes = load_resource(io.BytesIO(text.encode("utf-8")))

    assert from_text.self_link.href == from_bytes.self_link.href
    assert from_text.link_href("author") == "/people/alan-watts"


def test_load_resource_malformed():
    with pytest.raises(HalParseError):
        load_resource(io.StringIO("{"))
    with pytest.raises(HalParseError):
        load_resource(io.StringIO('{"_links": {"self": "x"}}'), Item)
