from enum import StrEnum


class BoolType(StrEnum):
    """
    The closed set of clause buckets of a [`BoolQuery`][searchdsl.models.query.BoolQuery].

    The declaration order is also the order in which non-empty buckets are
    rendered inside the `bool` body.
    """

    MUST = "must"
    """Clauses that must match and contribute to the score."""

    SHOULD = "should"
    """Clauses that should match; governed by `minimum_should_match`."""

    MUST_NOT = "must_not"
    """Clauses that must not match; executed in filter context."""

    FILTER = "filter"
    """Clauses that must match; executed in filter context without scoring."""
