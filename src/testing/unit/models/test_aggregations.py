import pytest

from searchdsl import (
    AvgAggregation,
    FilterAggregation,
    InvalidInputError,
    NestedAggregation,
    ReverseNestedAggregation,
    TermQuery,
    TermsAggregation,
)
from searchdsl.models.aggregation import Aggregation


def test_terms_without_field_renders_empty_body():
    assert TermsAggregation("acme").to_dict() == {"terms": {}}


def test_terms_with_field_and_parameters():
    agg = TermsAggregation("tags", "tag", parameters={"size": 10})

    assert agg.to_dict() == {"terms": {"field": "tag", "size": 10}}


def test_nested_aggregation_with_child():
    agg = NestedAggregation("foo", "path").add_aggregation(TermsAggregation("acme"))

    assert agg.to_dict() == {
        "nested": {"path": "path"},
        "aggregations": {"acme": {"terms": {}}},
    }


def test_two_level_nesting_keeps_each_aggregations_key():
    agg = NestedAggregation("comments", "comments").add_aggregation(
        TermsAggregation("authors", "comments.author").add_aggregation(
            AvgAggregation("avg_likes", "comments.likes")
        )
    )

    assert agg.to_dict() == {
        "nested": {"path": "comments"},
        "aggregations": {
            "authors": {
                "terms": {"field": "comments.author"},
                "aggregations": {
                    "avg_likes": {"avg": {"field": "comments.likes"}},
                },
            }
        },
    }


def test_child_with_same_name_replaces_previous():
    agg = (
        TermsAggregation("tags", "tag")
        .add_aggregation(AvgAggregation("score", "a"))
        .add_aggregation(AvgAggregation("score", "b"))
    )

    assert list(agg.get_aggregations()) == ["score"]
    assert agg.to_dict()["aggregations"] == {"score": {"avg": {"field": "b"}}}


def test_metric_aggregation_rejects_children():
    agg = AvgAggregation("avg", "price")

    with pytest.raises(InvalidInputError, match="does not support nested"):
        agg.add_aggregation(TermsAggregation("acme"))

    assert agg.get_aggregations() == {}


def test_filter_aggregation_renders_query_body():
    agg = FilterAggregation("published", TermQuery("status", "published"))

    assert agg.to_dict() == {"filter": {"term": {"status": "published"}}}


def test_reverse_nested_without_path():
    assert ReverseNestedAggregation("back").to_dict() == {"reverse_nested": {}}


def test_base_aggregation_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Aggregation("x")
