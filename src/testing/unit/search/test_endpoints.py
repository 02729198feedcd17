import pytest

from searchdsl import (
    BoolType,
    EndpointName,
    FieldSort,
    Highlight,
    InvalidInputError,
    MatchAllQuery,
    NestedInnerHit,
    Suggest,
    TermsAggregation,
)
from searchdsl.search import (
    AggregationsEndpoint,
    HighlightEndpoint,
    InnerHitsEndpoint,
    QueryEndpoint,
    SearchEndpoint,
    SearchEndpointFactory,
    SortEndpoint,
    SuggestEndpoint,
)


def test_factory_creates_each_endpoint():
    assert isinstance(SearchEndpointFactory.get("query"), QueryEndpoint)
    assert isinstance(SearchEndpointFactory.get(EndpointName.SORT), SortEndpoint)
    assert SearchEndpointFactory.names()[0] == EndpointName.QUERY


def test_factory_rejects_unknown_names():
    with pytest.raises(InvalidInputError):
        SearchEndpointFactory.get("nope")

    # URI parameters are not a body endpoint
    with pytest.raises(InvalidInputError):
        SearchEndpointFactory.get(EndpointName.URI_PARAMS)


def test_empty_endpoints_render_nothing():
    for name in SearchEndpointFactory.names():
        assert SearchEndpointFactory.get(name).normalize() is None


def test_query_endpoint_creates_bool_lazily():
    endpoint = QueryEndpoint()
    assert endpoint.get_bool() is None
    assert endpoint.is_empty()

    endpoint.add(MatchAllQuery(), "all", BoolType.FILTER)

    assert endpoint.normalize() == {"bool": {"filter": [{"match_all": {}}]}}
    assert isinstance(endpoint.get("all"), MatchAllQuery)


def test_aggregations_are_keyed_by_name():
    endpoint = AggregationsEndpoint()
    endpoint.add(TermsAggregation("acme"), "ignored")

    assert list(endpoint.get_all()) == ["acme"]
    assert endpoint.normalize() == {"acme": {"terms": {}}}


def test_sort_endpoint_renders_list_in_insertion_order():
    endpoint = SortEndpoint()
    endpoint.add(FieldSort("b"))
    endpoint.add(FieldSort("a"))

    assert endpoint.normalize() == [{"b": {}}, {"a": {}}]


def test_suggest_endpoint_merges_suggesters():
    endpoint = SuggestEndpoint()
    endpoint.add(Suggest("one", "term", "x", "title"))
    endpoint.add(Suggest("two", "phrase", "y", "body"))

    assert endpoint.normalize() == {
        "one": {"text": "x", "term": {"field": "title"}},
        "two": {"text": "y", "phrase": {"field": "body"}},
    }


def test_highlight_endpoint_keeps_last_highlight():
    endpoint = HighlightEndpoint()
    endpoint.add(Highlight().add_field("a"))
    endpoint.add(Highlight().add_field("b"))

    assert endpoint.normalize() == {"fields": {"b": {}}}


def test_inner_hits_render_by_name():
    endpoint = InnerHitsEndpoint()
    endpoint.add(NestedInnerHit("comments", "comments"), "storage-key")

    assert "storage-key" in endpoint.get_all()
    assert endpoint.normalize() == {"comments": {"path": {"comments": {}}}}


def test_base_endpoint_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SearchEndpoint()
