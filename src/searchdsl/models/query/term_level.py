"""
Term-level queries: exact matches on structured (non-analyzed) values.
"""

from typing import Any, Dict, List, Optional

from ..mixins import ParametersMixin


class TermQuery(ParametersMixin):
    """
    Matches documents containing an exact term.

    Without parameters the short form `{"term": {field: value}}` is rendered;
    with parameters the value moves under `value`:
    `{"term": {field: {"value": value, "boost": 2}}}`.
    """

    def __init__(
        self, field: str, value: Any, parameters: Optional[Dict[str, Any]] = None
    ):
        self.field = field
        self.value = value
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        if not self._parameters:
            return {"term": {self.field: self.value}}
        return {"term": {self.field: self._process_dict({"value": self.value})}}


class TermsQuery(ParametersMixin):
    """Matches documents containing any of the given terms."""

    def __init__(
        self,
        field: str,
        terms: List[Any],
        parameters: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        self.terms = list(terms)
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        return {"terms": self._process_dict({self.field: list(self.terms)})}


class RangeQuery(ParametersMixin):
    """
    Matches documents whose field falls in a range.

    Bounds are given as parameters (`gte`, `gt`, `lte`, `lt`, `format`, ...).
    """

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    def __init__(self, field: str, parameters: Optional[Dict[str, Any]] = None):
        self.field = field
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        return {"range": {self.field: self._process_dict()}}


class ExistsQuery:
    """Matches documents that have any indexed value for `field`."""

    def __init__(self, field: str):
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        return {"exists": {"field": self.field}}
