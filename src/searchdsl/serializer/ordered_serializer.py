"""
Ordered Serializer Module.

Two requests with the same content must serialize to the same bytes, whatever
order their parts were set in. The [`OrderedSerializer`][searchdsl.serializer.OrderedSerializer]
guarantees this by re-ordering every mapping against a declared key table for
its structural *shape* (request body, bool body, aggregation, sort, ...):

1. **Leading keys** declared for the shape come first, in declared order.
2. **Unknown keys** (field names, aggregation names, ...) follow, in their
   current order, or alphabetically when `sort_unknown_keys` is set. Encoding
   through `dumps()` sorts them by default.
3. **Trailing keys** declared for the shape come last (e.g. child `aggregations`).

Sequences keep their element order; each element is normalized with the shape of
the sequence.

The serializer holds no mutable state. A single process-wide instance is created
lazily by [`get_serializer()`][searchdsl.serializer.get_serializer].
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..logging_config import get_logger
from ..models.protocols import RenderableProtocol
from .config import SerializationConfig

# Set the hierarchical logger
logger = get_logger(__name__)


@dataclass(frozen=True)
class _Shape:
    """Key ordering and child shapes of one kind of mapping."""

    leading: Tuple[str, ...] = ()
    trailing: Tuple[str, ...] = ()
    children: Mapping[str, str] = field(default_factory=dict)
    default: str = "generic"


SEARCH = "search"
GENERIC = "generic"

_SHAPES: Dict[str, _Shape] = {
    SEARCH: _Shape(
        leading=(
            "query",
            "post_filter",
            "sort",
            "aggregations",
            "suggest",
            "highlight",
            "inner_hits",
            "from",
            "size",
            "min_score",
            "_source",
            "track_total_hits",
            "explain",
            "version",
            "search_after",
            "docvalue_fields",
            "stored_fields",
            "script_fields",
            "indices_boost",
        ),
        children={
            "query": "clause",
            "post_filter": "clause",
            "sort": "sort",
            "aggregations": "aggregation_map",
            "suggest": "suggest_map",
            "highlight": "highlight",
            "inner_hits": "inner_hit_map",
        },
    ),
    "clause": _Shape(children={"bool": "bool", "nested": "nested_query"}),
    "bool": _Shape(
        leading=(
            "must",
            "should",
            "must_not",
            "filter",
            "minimum_should_match",
            "boost",
            "_name",
            "adjust_pure_negative",
        ),
        children={
            "must": "clause",
            "should": "clause",
            "must_not": "clause",
            "filter": "clause",
        },
    ),
    "nested_query": _Shape(
        leading=("path", "query", "score_mode", "ignore_unmapped", "boost", "_name"),
        trailing=("inner_hits",),
        children={"query": "clause"},
    ),
    "aggregation_map": _Shape(default="aggregation"),
    "aggregation": _Shape(
        trailing=("aggregations",),
        children={
            "aggregations": "aggregation_map",
            "filter": "clause",
            "nested": "nested_path",
            "reverse_nested": "nested_path",
        },
    ),
    "nested_path": _Shape(leading=("path",)),
    "sort": _Shape(
        leading=("path", "filter", "nested"),
        children={"filter": "clause", "nested": "sort"},
        default="sort_body",
    ),
    "sort_body": _Shape(
        leading=("order", "mode", "missing", "unmapped_type", "nested"),
        children={"nested": "sort"},
    ),
    "suggest_map": _Shape(default="suggest"),
    "suggest": _Shape(leading=("text", "prefix", "regex")),
    "highlight": _Shape(leading=("pre_tags", "post_tags"), trailing=("fields",)),
    "inner_hit_map": _Shape(default="inner_hit_relation"),
    "inner_hit_relation": _Shape(default="inner_hit_path"),
    "inner_hit_path": _Shape(default="inner_hit"),
    "inner_hit": _Shape(
        leading=("query",),
        trailing=("inner_hits",),
        children={"query": "clause", "inner_hits": "inner_hit_map"},
    ),
    GENERIC: _Shape(),
}


class OrderedSerializer:
    """
    Normalizes rendered request structures into a deterministic key order.

    `normalize()` is total (it never raises on plain data) and idempotent:
    `normalize(normalize(x)) == normalize(x)`, including key order.

    Example:
        ```python
        from searchdsl.serializer import get_serializer

        get_serializer().normalize({"size": 5, "from": 10, "query": {"match_all": {}}})
        # {"query": {"match_all": {}}, "from": 10, "size": 5}
        ```
    """

    def __init__(self):
        self._shapes = _SHAPES

    def normalize(
        self, structure: Any, shape: str = SEARCH, sort_unknown_keys: bool = False
    ) -> Any:
        """
        Returns a re-ordered deep copy of `structure`.

        Args:
            structure: A mapping, sequence, scalar, or any object with `to_dict()`.
            shape: The shape of the top-level value. Defaults to a request body;
                unknown shape names fall back to a shape with no declared keys.
            sort_unknown_keys: Order undeclared keys alphabetically.
        """
        return self._walk(
            structure, self._shapes.get(shape, self._shapes[GENERIC]), sort_unknown_keys
        )

    def _walk(self, value: Any, shape: _Shape, sort_unknown_keys: bool) -> Any:
        if not isinstance(value, Mapping) and isinstance(value, RenderableProtocol):
            value = value.to_dict()

        if isinstance(value, Mapping):
            leading = [k for k in shape.leading if k in value]
            trailing = [k for k in shape.trailing if k in value]
            middle = [
                k
                for k in value
                if k not in shape.leading and k not in shape.trailing
            ]
            if sort_unknown_keys:
                middle.sort(key=str)

            result = {}
            for key in leading + middle + trailing:
                child = self._shapes[shape.children.get(key, shape.default)]
                result[key] = self._walk(value[key], child, sort_unknown_keys)
            return result

        if isinstance(value, (list, tuple)):
            return [self._walk(item, shape, sort_unknown_keys) for item in value]

        return value

    def dumps(
        self,
        structure: Any,
        config: Optional[SerializationConfig] = None,
        shape: str = SEARCH,
    ) -> str:
        """
        Normalizes `structure` and encodes it as JSON text.

        With the default config the output is compact (`","` and `":"`
        separators) and undeclared keys are sorted, so equal requests yield
        byte-identical strings whatever their build order.
        """
        config = config or SerializationConfig()
        normalized = self.normalize(structure, shape, config.sort_unknown_keys)
        return json.dumps(
            normalized,
            indent=config.indent,
            ensure_ascii=config.ensure_ascii,
            separators=None if config.indent is not None else (",", ":"),
        )


_serializer: Optional[OrderedSerializer] = None


def get_serializer() -> OrderedSerializer:
    """
    Returns the process-wide serializer, creating it on first use.

    Concurrent first calls may each build an instance; the last assignment wins
    and every instance behaves identically.
    """
    global _serializer
    if _serializer is None:
        _serializer = OrderedSerializer()
        logger.debug("Ordered serializer initialized")
    return _serializer


def reset_serializer():
    """Drops the process-wide serializer; the next access rebuilds it."""
    global _serializer
    _serializer = None
