from typing import Any, Dict, Optional

from ..mixins import ParametersMixin


class MatchAllQuery(ParametersMixin):
    """Matches every document. Renders `{"match_all": {}}`."""

    def __init__(self, parameters: Optional[Dict[str, Any]] = None):
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        return {"match_all": self._process_dict()}
