"""
Bucketing aggregations: aggregations that build buckets of documents and can
therefore carry child aggregations.
"""

from typing import Any, Dict, Optional

from ..protocols import RenderableProtocol
from .base import Aggregation, FieldAggregation


class TermsAggregation(FieldAggregation):
    """One bucket per unique value of `field`. Renders `{"terms": {...}}`."""

    __aggregation_type__ = "terms"
    __supports_nesting__ = True


class NestedAggregation(Aggregation):
    """
    Aggregates over nested documents stored under `path`.

    Example:
        ```python
        from searchdsl import NestedAggregation, TermsAggregation

        NestedAggregation("foo", "path").add_aggregation(TermsAggregation("acme")).to_dict()
        # {"nested": {"path": "path"}, "aggregations": {"acme": {"terms": {}}}}
        ```
    """

    __aggregation_type__ = "nested"
    __supports_nesting__ = True

    def __init__(
        self, name: str, path: str, parameters: Optional[Dict[str, Any]] = None
    ):
        super().__init__(name, parameters)
        self.path = path

    def _body(self) -> Dict[str, Any]:
        return {"path": self.path}


class ReverseNestedAggregation(Aggregation):
    """Joins back from nested documents to their parent (or to `path`)."""

    __aggregation_type__ = "reverse_nested"
    __supports_nesting__ = True

    def __init__(
        self,
        name: str,
        path: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(name, parameters)
        self.path = path

    def _body(self) -> Dict[str, Any]:
        return {"path": self.path} if self.path is not None else {}


class FilterAggregation(Aggregation):
    """A single bucket of the documents matching `filter`."""

    __aggregation_type__ = "filter"
    __supports_nesting__ = True

    def __init__(self, name: str, filter: RenderableProtocol):
        super().__init__(name)
        self.filter = filter

    def _body(self) -> Dict[str, Any]:
        return self.filter.to_dict()
