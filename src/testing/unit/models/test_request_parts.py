from searchdsl import (
    ExistsQuery,
    FieldSort,
    Highlight,
    MatchPhraseQuery,
    MatchQuery,
    MultiMatchQuery,
    NestedInnerHit,
    NestedQuery,
    NestedSort,
    ParentInnerHit,
    RangeQuery,
    Suggest,
    TermQuery,
    TermsQuery,
)


def test_field_sort():
    assert FieldSort("foo").to_dict() == {"foo": {}}
    assert FieldSort("price", FieldSort.ASC, parameters={"mode": "min"}).to_dict() == {
        "price": {"order": "asc", "mode": "min"}
    }


def test_nested_sort_drops_inner_direction():
    sort = NestedSort("foo", FieldSort("foo", FieldSort.DESC))

    assert sort.to_dict() == {"path": "foo", "filter": {"foo": {}}}


def test_nested_sort_with_query_filter_and_deeper_level():
    sort = NestedSort(
        "offers",
        TermQuery("offers.color", "blue"),
        nested=NestedSort("offers.variants"),
        parameters={"max_children": 5},
    )

    assert sort.to_dict() == {
        "path": "offers",
        "filter": {"term": {"offers.color": "blue"}},
        "nested": {"path": "offers.variants"},
        "max_children": 5,
    }


def test_field_sort_scoped_by_nested_sort():
    sort = FieldSort("offers.price", FieldSort.ASC, nested=NestedSort("offers"))

    assert sort.to_dict() == {
        "offers.price": {"order": "asc", "nested": {"path": "offers"}}
    }


def test_suggest():
    suggest = Suggest("foo", "term", "bar", "title", parameters={"size": 3})

    assert suggest.name() == "foo"
    assert suggest.to_dict() == {
        "foo": {"text": "bar", "term": {"field": "title", "size": 3}}
    }


def test_empty_highlight():
    assert Highlight().to_dict() == {}


def test_highlight_with_tags_fields_and_parameters():
    highlight = (
        Highlight(parameters={"order": "score"})
        .set_tags(["<em>"], ["</em>"])
        .add_field("title")
        .add_field("body", {"fragment_size": 150})
    )

    assert highlight.to_dict() == {
        "pre_tags": ["<em>"],
        "post_tags": ["</em>"],
        "order": "score",
        "fields": {"title": {}, "body": {"fragment_size": 150}},
    }


def test_nested_inner_hit_is_keyed_by_path():
    assert NestedInnerHit("foo", "foo").to_dict() == {"path": {"foo": {}}}


def test_inner_hit_with_query_and_children():
    inner_hit = NestedInnerHit(
        "comments", "comments", MatchQuery("comments.text", "great")
    ).add_inner_hit(ParentInnerHit("answers", "answer", parameters={"size": 1}))

    assert inner_hit.to_dict() == {
        "path": {
            "comments": {
                "query": {"match": {"comments.text": {"query": "great"}}},
                "inner_hits": {"answers": {"type": {"answer": {"size": 1}}}},
            }
        }
    }


def test_leaf_queries():
    assert TermQuery("a", 1).to_dict() == {"term": {"a": 1}}
    assert TermQuery("a", 1, {"boost": 2}).to_dict() == {
        "term": {"a": {"value": 1, "boost": 2}}
    }
    assert TermsQuery("foo", ["bar"]).to_dict() == {"terms": {"foo": ["bar"]}}
    assert RangeQuery("age", {RangeQuery.GTE: 18}).to_dict() == {
        "range": {"age": {"gte": 18}}
    }
    assert ExistsQuery("email").to_dict() == {"exists": {"field": "email"}}
    assert MatchPhraseQuery("title", "to be").to_dict() == {
        "match_phrase": {"title": {"query": "to be"}}
    }
    assert MultiMatchQuery(["title", "body"], "apollo").to_dict() == {
        "multi_match": {"query": "apollo", "fields": ["title", "body"]}
    }
    assert NestedQuery("comments", TermQuery("comments.author", "ada")).to_dict() == {
        "nested": {"path": "comments", "query": {"term": {"comments.author": "ada"}}}
    }
