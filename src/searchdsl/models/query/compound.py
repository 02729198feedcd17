"""
Compound Queries.

This module provides the [`BoolQuery`][searchdsl.models.query.BoolQuery], the
boolean combinator every query and post-filter of a request is assembled in.
"""

from typing import Any, Dict, Iterable, Optional, Union

from ...enum import BoolType
from ...errors import InvalidInputError
from ...logging_config import get_logger
from ..collection import KeyedCollection
from ..mixins import ParametersMixin
from ..protocols import RenderableProtocol

# Set the hierarchical logger
logger = get_logger(__name__)


def validate_bool_type(bool_type: Union[BoolType, str]) -> BoolType:
    """
    Resolves a bucket name against the closed set of bool types.

    Raises an InvalidInputError if the name is not one of
    `must`, `should`, `must_not`, `filter`.
    """
    try:
        return BoolType(bool_type)
    except ValueError:
        logger.debug(f"Rejected unknown bool bucket '{bool_type}'")
        raise InvalidInputError(
            f"The bool operator '{bool_type}' is not supported. "
            f"Expected one of {[b.value for b in BoolType]}."
        ) from None


class BoolQuery(ParametersMixin):
    """
    A keyed, multi-bucket container of queries rendered as `{"bool": {...}}`.

    Clauses are grouped in four buckets: `must`, `should`, `must_not` and
    `filter`. Each bucket is an ordered mapping:

    * an insertion **with a key** replaces the clause previously stored under the
      same key, keeping its position;
    * an insertion **without a key** is always appended.

    A `BoolQuery` can itself be a clause of another `BoolQuery`, to any depth.

    Example:
        ```python
        from searchdsl import BoolQuery, BoolType, MatchQuery

        bool_query = (
            BoolQuery()
            .add(MatchQuery("title", "apollo"))
            .add(MatchQuery("title", "gemini"), BoolType.SHOULD)
            .add_parameter("minimum_should_match", 1)
        )
        bool_query.to_dict()
        # {"bool": {"must": [{"match": {"title": {"query": "apollo"}}}],
        #           "should": [{"match": {"title": {"query": "gemini"}}}],
        #           "minimum_should_match": 1}}
        ```
    """

    MUST = BoolType.MUST
    SHOULD = BoolType.SHOULD
    MUST_NOT = BoolType.MUST_NOT
    FILTER = BoolType.FILTER

    def __init__(
        self,
        queries: Optional[
            Dict[Union[BoolType, str], Union[RenderableProtocol, Iterable[RenderableProtocol]]]
        ] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        """
        Initializes the combinator, optionally pre-filled.

        Args:
            queries: A mapping from bucket name to a single query or a list of
                queries. Every query is appended without a key.
            parameters: Combinator-level options such as `minimum_should_match`.

        Raises:
            InvalidInputError: If a bucket name is not supported.
        """
        self._container: Dict[BoolType, KeyedCollection[RenderableProtocol]] = {}
        self._init_parameters(parameters)

        for bool_type, value in (queries or {}).items():
            items = [value] if isinstance(value, RenderableProtocol) else list(value)
            for query in items:
                self.add(query, bool_type)

    def add(
        self,
        query: RenderableProtocol,
        bool_type: Union[BoolType, str] = BoolType.MUST,
        key: Optional[str] = None,
    ) -> "BoolQuery":
        """
        Adds a clause to one of the buckets using a fluent interface.

        Args:
            query: Any renderable query, including another `BoolQuery`.
            bool_type: The target bucket. Defaults to `must`.
            key: Optional key; an existing clause under the same key is replaced.

        Returns:
            The `BoolQuery` instance for method chaining.

        Raises:
            InvalidInputError: If `bool_type` is not a supported bucket.
        """
        bucket = validate_bool_type(bool_type)
        self._container.setdefault(bucket, KeyedCollection()).add(query, key)
        return self

    def get_queries(
        self, bool_type: Optional[Union[BoolType, str]] = None
    ) -> Dict[str, RenderableProtocol]:
        """
        Returns the clauses of one bucket keyed as stored.

        When `bool_type` is None, the clauses of all buckets are returned in
        bucket order. Auto keys are unique per bucket only, so a later bucket may
        shadow an entry of an earlier one in this flattened view.

        Raises:
            InvalidInputError: If `bool_type` is not a supported bucket.
        """
        if bool_type is None:
            merged: Dict[str, RenderableProtocol] = {}
            for bucket in BoolType:
                if bucket in self._container:
                    merged.update(self._container[bucket].to_mapping())
            return merged

        bucket = validate_bool_type(bool_type)
        if bucket not in self._container:
            return {}
        return self._container[bucket].to_mapping()

    def is_empty(self) -> bool:
        """True when no bucket holds a clause and no parameter is set."""
        return not any(self._container.values()) and not self._parameters

    def _single_must_child(self) -> Optional["BoolQuery"]:
        # A lone bool under must with no options is rendered in place of its parent
        if self._parameters:
            return None
        buckets = [b for b, items in self._container.items() if items]
        if buckets != [BoolType.MUST] or len(self._container[BoolType.MUST]) != 1:
            return None
        child = next(self._container[BoolType.MUST].values())
        return child if isinstance(child, BoolQuery) else None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the combinator into the engine's `bool` query format.

        Non-empty buckets are rendered as lists (even with a single clause) in
        the order `must`, `should`, `must_not`, `filter`, followed by the
        parameters. An empty combinator renders `{"bool": {}}`.

        Example Output:
            `{"bool": {"must": [{"match_all": {}}], "boost": 1.2}}`
        """
        child = self._single_must_child()
        if child is not None:
            return child.to_dict()

        body: Dict[str, Any] = {}
        for bucket in BoolType:
            items = self._container.get(bucket)
            if items:
                body[bucket.value] = [query.to_dict() for query in items.values()]

        return {"bool": self._process_dict(body)}
