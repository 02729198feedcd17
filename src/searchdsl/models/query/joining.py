from typing import Any, Dict, Optional

from ..mixins import ParametersMixin
from ..protocols import RenderableProtocol


class NestedQuery(ParametersMixin):
    """
    Runs `query` against the nested objects stored under `path`.

    Example Output:
        `{"nested": {"path": "comments", "query": {"match": {...}}, "score_mode": "avg"}}`
    """

    def __init__(
        self,
        path: str,
        query: RenderableProtocol,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        self.query = query
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nested": self._process_dict(
                {"path": self.path, "query": self.query.to_dict()}
            )
        }
