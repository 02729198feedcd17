"""
Full-text queries: analyzed searches over text fields.
"""

from typing import Any, Dict, List, Optional

from ..mixins import ParametersMixin


class MatchQuery(ParametersMixin):
    """
    The standard analyzed query on a single field.

    Example Output:
        `{"match": {"title": {"query": "apollo", "operator": "and"}}}`
    """

    def __init__(
        self, field: str, query: Any, parameters: Optional[Dict[str, Any]] = None
    ):
        self.field = field
        self.query = query
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        return {"match": {self.field: self._process_dict({"query": self.query})}}


class MatchPhraseQuery(MatchQuery):
    """Like [`MatchQuery`][searchdsl.models.query.MatchQuery] but matches the terms as a phrase."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_phrase": {self.field: self._process_dict({"query": self.query})}
        }


class MultiMatchQuery(ParametersMixin):
    """Runs a match query across several fields."""

    def __init__(
        self,
        fields: List[str],
        query: Any,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        self.fields = list(fields)
        self.query = query
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"query": self.query}
        if self.fields:
            body["fields"] = list(self.fields)
        return {"multi_match": self._process_dict(body)}
