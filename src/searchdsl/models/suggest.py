from typing import Any, Dict, Optional

from .mixins import ParametersMixin


class Suggest(ParametersMixin):
    """
    A named suggester (`term`, `phrase`, `completion`, ...).

    Example Output:
        `{"title_suggest": {"text": "apolo", "term": {"field": "title", "size": 3}}}`
    """

    def __init__(
        self,
        name: str,
        type: str,
        text: str,
        field: str,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        self._name = name
        self.type = type
        self.text = text
        self.field = field
        self._init_parameters(parameters)

    def name(self) -> str:
        return self._name

    def to_dict(self) -> Dict[str, Any]:
        return {
            self._name: {
                "text": self.text,
                self.type: self._process_dict({"field": self.field}),
            }
        }
