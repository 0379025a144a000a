import io
import json
from typing import Dict, List

import pytest
from hal_client import (
    ConversionOptions,
    HalParseError,
    HalResource,
    Link,
    LinkCollection,
    parse_json,
)
from hal_client.core import bind, dump_json, dump_python, load_json
from hal_client.core.codec import apply_naming
from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel, to_snake


class Basket(BaseModel):
    basket_id: int
    item_names: List[str]


def test_parse_json_returns_plain_tree():
    tree = parse_json('{"_links": {"self": {"href": "/a"}}, "n": [1, 2.5, null]}')
    assert tree == {"_links": {"self": {"href": "/a"}}, "n": [1, 2.5, None]}


@pytest.mark.parametrize("text", ["", "{", "[1,", "nope"])
def test_parse_json_malformed(text):
    with pytest.raises(HalParseError):
        parse_json(text)


def test_load_json_reads_rest_of_stream():
    stream = io.StringIO('xx{"a": 1}')
    stream.read(2)
    assert load_json(stream) == {"a": 1}
    assert load_json(io.BytesIO(b"[true]")) == [True]


def test_bind_to_any_target():
    assert bind({"basket_id": 7, "item_names": ["tea"]}, Basket) == Basket(
        basket_id=7, item_names=["tea"]
    )
    assert bind([1, "2"], List[int]) == [1, 2]
    assert bind({"a": 1}, Dict[str, int]) == {"a": 1}


def test_bind_mismatch_raises_validation_error():
    with pytest.raises(ValidationError):
        bind({"basket_id": "x"}, Basket)


def test_bind_with_naming_rule():
    tree = {"basketId": 7, "itemNames": ["tea"]}
    basket = bind(tree, Basket, ConversionOptions(naming="snake"))
    assert basket.basket_id == 7


def test_bind_strict():
    with pytest.raises(ValidationError):
        bind(["1"], List[int], ConversionOptions(strict=True))


def test_apply_naming_skips_reserved_keys():
    tree = {
        "_links": {"someRel": {"href": "/a"}},
        "outerKey": [{"innerKey": 1}],
        "_embedded": {"keepMe": {"deepKey": 2}},
    }
    assert apply_naming(tree, to_snake) == {
        "_links": {"someRel": {"href": "/a"}},
        "outer_key": [{"inner_key": 1}],
        "_embedded": {"keepMe": {"deepKey": 2}},
    }
    assert apply_naming({"snake_case": 1}, to_camel) == {"snakeCase": 1}
    assert apply_naming("scalar", to_snake) == "scalar"


def test_dump_python_uses_wire_names():
    single = LinkCollection(Link(href="/a", hreflang="en"))
    assert dump_python(single) == {"href": "/a", "hreflang": "en"}
    assert dump_python(LinkCollection([])) == []


def test_dump_json_resource():
    resource = HalResource.model_validate(
        {"_links": {"self": {"href": "/a"}, "items": [{"href": "/b"}]}}
    )
    assert json.loads(dump_json(resource)) == {
        "_links": {"self": {"href": "/a"}, "items": [{"href": "/b"}]},
        "_embedded": {},
    }
