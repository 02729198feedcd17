from typing import Any, Dict, List, Optional

from .mixins import ParametersMixin


class Highlight(ParametersMixin):
    """
    Highlighting settings of a request.

    Global options are set as parameters; per-field options are passed to
    `add_field()`. A field without options renders as `{}`.

    Example Output:
        `{"pre_tags": ["<em>"], "post_tags": ["</em>"], "fields": {"title": {}}}`
    """

    def __init__(self, parameters: Optional[Dict[str, Any]] = None):
        self._fields: Dict[str, Dict[str, Any]] = {}
        self._tags: Dict[str, List[str]] = {}
        self._init_parameters(parameters)

    def add_field(
        self, name: str, params: Optional[Dict[str, Any]] = None
    ) -> "Highlight":
        """Adds (or replaces) a highlighted field."""
        self._fields[name] = dict(params or {})
        return self

    def set_tags(self, pre_tags: List[str], post_tags: List[str]) -> "Highlight":
        """Sets the markers wrapped around highlighted fragments."""
        self._tags = {"pre_tags": list(pre_tags), "post_tags": list(post_tags)}
        return self

    def get_fields(self) -> Dict[str, Dict[str, Any]]:
        return {name: dict(params) for name, params in self._fields.items()}

    def to_dict(self) -> Dict[str, Any]:
        output = self._process_dict(
            {key: list(tags) for key, tags in self._tags.items()}
        )
        if self._fields:
            output["fields"] = {
                name: dict(params) for name, params in self._fields.items()
            }
        return output
