import pytest

from searchdsl import (
    BoolQuery,
    BoolType,
    InvalidInputError,
    MatchAllQuery,
    MatchQuery,
    TermQuery,
)


def test_empty_bool_renders_empty_body():
    assert BoolQuery().to_dict() == {"bool": {}}


def test_single_clause_bucket_is_a_list():
    bool_query = BoolQuery().add(TermQuery("status", "published"), BoolType.FILTER)

    assert bool_query.to_dict() == {
        "bool": {"filter": [{"term": {"status": "published"}}]}
    }


def test_buckets_render_in_declared_order():
    bool_query = (
        BoolQuery()
        .add(MatchAllQuery(), BoolType.FILTER)
        .add(MatchAllQuery(), BoolType.MUST_NOT)
        .add(MatchAllQuery(), BoolType.SHOULD)
        .add(MatchAllQuery(), BoolType.MUST)
    )

    assert list(bool_query.to_dict()["bool"]) == ["must", "should", "must_not", "filter"]


def test_keyed_insert_replaces_in_place():
    bool_query = BoolQuery()
    bool_query.add(MatchQuery("title", "first"), BoolType.SHOULD, "title")
    bool_query.add(MatchQuery("body", "other"), BoolType.SHOULD)
    bool_query.add(MatchQuery("title", "second"), BoolType.SHOULD, "title")

    queries = bool_query.get_queries(BoolType.SHOULD)
    assert len(queries) == 2
    assert queries["title"].query == "second"
    assert bool_query.to_dict()["bool"]["should"][0] == {
        "match": {"title": {"query": "second"}}
    }


def test_unkeyed_insert_always_appends():
    bool_query = BoolQuery()
    query = MatchAllQuery()
    bool_query.add(query)
    bool_query.add(query)

    assert len(bool_query.get_queries(BoolType.MUST)) == 2


def test_parameters_are_merged_into_bool_body():
    bool_query = (
        BoolQuery()
        .add(MatchAllQuery(), BoolType.SHOULD)
        .add_parameter("minimum_should_match", 1)
        .add_parameter("minimum_should_match", 2)
        .add_parameter("boost", 1.5)
    )

    assert bool_query.to_dict() == {
        "bool": {
            "should": [{"match_all": {}}],
            "minimum_should_match": 2,
            "boost": 1.5,
        }
    }


def test_parameters_only_bool_is_not_empty():
    bool_query = BoolQuery(parameters={"boost": 2})

    assert not bool_query.is_empty()
    assert bool_query.to_dict() == {"bool": {"boost": 2}}


def test_unknown_bucket_raises_without_mutation():
    bool_query = BoolQuery().add(MatchAllQuery())

    with pytest.raises(InvalidInputError, match="sometimes"):
        bool_query.add(MatchAllQuery(), "sometimes")

    with pytest.raises(InvalidInputError):
        bool_query.get_queries("sometimes")

    assert bool_query.to_dict() == {"bool": {"must": [{"match_all": {}}]}}


def test_constructor_accepts_single_queries_and_lists():
    bool_query = BoolQuery(
        {
            "must": MatchAllQuery(),
            "should": [TermQuery("a", 1), TermQuery("b", 2)],
        }
    )

    assert bool_query.to_dict() == {
        "bool": {
            "must": [{"match_all": {}}],
            "should": [{"term": {"a": 1}}, {"term": {"b": 2}}],
        }
    }


def test_nested_bool_renders_recursively():
    inner = BoolQuery().add(TermQuery("a", 1), BoolType.SHOULD)
    outer = BoolQuery().add(inner, BoolType.MUST_NOT).add(MatchAllQuery())

    assert outer.to_dict() == {
        "bool": {
            "must": [{"match_all": {}}],
            "must_not": [{"bool": {"should": [{"term": {"a": 1}}]}}],
        }
    }


def test_lone_bool_under_must_is_rendered_in_place():
    inner = BoolQuery().add(TermQuery("a", 1), BoolType.SHOULD)

    assert BoolQuery().add(inner).to_dict() == inner.to_dict()


def test_lone_bool_is_kept_when_parent_has_parameters():
    inner = BoolQuery().add(TermQuery("a", 1))
    outer = BoolQuery(parameters={"boost": 2}).add(inner)

    assert outer.to_dict() == {
        "bool": {"must": [{"bool": {"must": [{"term": {"a": 1}}]}}], "boost": 2}
    }


def test_get_queries_without_bucket_returns_all():
    bool_query = (
        BoolQuery()
        .add(MatchAllQuery(), BoolType.MUST, "all")
        .add(TermQuery("a", 1), BoolType.FILTER, "a")
    )

    assert list(bool_query.get_queries()) == ["all", "a"]
    assert bool_query.get_queries(BoolType.SHOULD) == {}
