import pytest
from hal_client import Cardinality, CardinalityError, Link, LinkCollection, LinkToken
from hal_client.core import TryGetResult


def test_to_single_on_plural_names_the_relation():
    token = LinkToken("ea:admin", LinkCollection([Link(href="/admins/2")]))
    with pytest.raises(CardinalityError) as exc:
        token.to_single()
    assert exc.value.rel == "ea:admin"
    assert exc.value.expected is Cardinality.SINGULAR
    assert exc.value.actual is Cardinality.PLURAL
    assert "ea:admin" in str(exc.value)
    assert "array" in str(exc.value)


def test_to_many_on_singular_names_the_relation():
    token = LinkToken("author", LinkCollection(Link(href="/people/alan-watts")))
    with pytest.raises(CardinalityError) as exc:
        token.to_many()
    assert exc.value.rel == "author"
    assert "author" in str(exc.value)
    assert "object" in str(exc.value)


def test_to_many_returns_a_fixed_snapshot():
    links = [Link(href="/admins/2"), Link(href="/admins/5")]
    token = LinkToken("ea:admin", LinkCollection(links))
    many = token.to_many()
    assert many == tuple(links)
    assert isinstance(many, tuple)


def test_to_many_on_empty_collection_is_empty_not_none():
    assert LinkToken("items", LinkCollection([])).to_many() == ()


def test_absent_collection_behaves_as_empty_plural():
    token = LinkToken("items", None)
    assert token.cardinality is Cardinality.PLURAL
    assert token.to_many() == ()


def test_equality_is_over_rel_and_collection_identity():
    collection = LinkCollection(Link(href="/orders/523"))
    same_shape = LinkCollection(Link(href="/orders/523"))

    assert LinkToken("self", collection) == LinkToken("self", collection)
    assert hash(LinkToken("self", collection)) == hash(LinkToken("self", collection))
    assert LinkToken("self", collection) != LinkToken("Self", collection)
    assert LinkToken("self", collection) != LinkToken("self", same_shape)
    assert len({LinkToken("self", collection), LinkToken("self", collection)}) == 1


def test_token_str():
    token = LinkToken("author", LinkCollection(Link(href="/people/alan-watts")))
    assert str(token) == "author: singular"


def test_rel_must_be_a_string():
    with pytest.raises(TypeError):
        LinkToken(None, LinkCollection([]))


def test_try_get_result_unpacks_and_tests_false_when_missing():
    found, value = TryGetResult(False)
    assert found is False and value is None
    assert not TryGetResult(False)
    assert TryGetResult(True, 0)
