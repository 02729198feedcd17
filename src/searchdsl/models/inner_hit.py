"""
Inner Hits.

Inner hits return, alongside each hit, the nested or child documents that caused
it to match. They are rendered keyed first by the kind of relation (`path` for
nested documents, `type` for parent/child) and then by the path itself.
"""

from typing import Any, Dict, Optional

from .mixins import ParametersMixin
from .protocols import RenderableProtocol


class NestedInnerHit(ParametersMixin):
    """
    Inner hits over the nested documents under `path`.

    Example:
        ```python
        from searchdsl import MatchQuery, NestedInnerHit

        NestedInnerHit("comments", "comments", MatchQuery("comments.author", "ada")).to_dict()
        # {"path": {"comments": {"query": {"match": {"comments.author": {"query": "ada"}}}}}}
        ```
    """

    __path_type__ = "path"

    def __init__(
        self,
        name: str,
        path: str,
        query: Optional[RenderableProtocol] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        self._name = name
        self.path = path
        self.query = query
        self._inner_hits: Dict[str, "NestedInnerHit"] = {}
        self._init_parameters(parameters)

    def name(self) -> str:
        return self._name

    def add_inner_hit(self, inner_hit: "NestedInnerHit") -> "NestedInnerHit":
        """Attaches a deeper inner hit, keyed by its name (last write wins)."""
        self._inner_hits[inner_hit.name()] = inner_hit
        return self

    def get_inner_hits(self) -> Dict[str, "NestedInnerHit"]:
        return dict(self._inner_hits)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.query is not None:
            body["query"] = self.query.to_dict()
        if self._inner_hits:
            body["inner_hits"] = {
                name: hit.to_dict() for name, hit in self._inner_hits.items()
            }
        return {self.__path_type__: {self.path: self._process_dict(body)}}


class ParentInnerHit(NestedInnerHit):
    """Inner hits over the child documents of type `path`."""

    __path_type__ = "type"
