"""
Aggregation Base Module.

Every aggregation renders as `{<type>: <body>}` and is stored by its parent
(a [`Search`][searchdsl.search.Search] or another aggregation) under its name.
Bucketing aggregations can carry child aggregations, which are rendered next to
the type key under `aggregations`, recursively and to any depth:

```
{
    "<type>": {...},
    "aggregations": {
        "<child name>": {"<child type>": {...}, "aggregations": {...}},
    },
}
```
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ...errors import InvalidInputError
from ...logging_config import get_logger
from ..mixins import ParametersMixin

# Set the hierarchical logger
logger = get_logger(__name__)


class Aggregation(ParametersMixin, ABC):
    """
    Base class for all aggregations.

    Subclasses declare their engine type in `__aggregation_type__` and build the
    type-specific body in `_body()`. Parameters are merged into that body.

    Attributes:
        __aggregation_type__: The key the body is rendered under (e.g. `"terms"`).
        __supports_nesting__: Whether child aggregations may be attached.
    """

    __aggregation_type__: str = ""
    __supports_nesting__: bool = False

    def __init__(self, name: str, parameters: Optional[Dict[str, Any]] = None):
        self._name = name
        self._aggregations: Dict[str, "Aggregation"] = {}
        self._init_parameters(parameters)

    def name(self) -> str:
        """Returns the key this aggregation is stored and rendered under."""
        return self._name

    def add_aggregation(self, aggregation: "Aggregation") -> "Aggregation":
        """
        Attaches a child aggregation, keyed by its name (last write wins).

        Returns:
            The parent aggregation for method chaining.

        Raises:
            InvalidInputError: If this aggregation type does not support children.
        """
        if not self.__supports_nesting__:
            logger.debug(
                f"Rejected child '{aggregation.name()}' on '{self.__aggregation_type__}' aggregation"
            )
            raise InvalidInputError(
                f"Aggregation '{self._name}' of type '{self.__aggregation_type__}' "
                "does not support nested aggregations."
            )
        self._aggregations[aggregation.name()] = aggregation
        return self

    def get_aggregations(self) -> Dict[str, "Aggregation"]:
        return dict(self._aggregations)

    def get_aggregation(self, name: str) -> Optional["Aggregation"]:
        return self._aggregations.get(name)

    @abstractmethod
    def _body(self) -> Dict[str, Any]:
        """Returns the type-specific body, before parameters are merged in."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the aggregation, children included.

        The `aggregations` key is emitted only when at least one child exists.

        Example Output:
            `{"nested": {"path": "comments"}, "aggregations": {"authors": {"terms": {"field": "author"}}}}`
        """
        result: Dict[str, Any] = {
            self.__aggregation_type__: self._process_dict(self._body())
        }
        if self._aggregations:
            result["aggregations"] = {
                name: agg.to_dict() for name, agg in self._aggregations.items()
            }
        return result


class FieldAggregation(Aggregation):
    """
    An aggregation computed over a `field` or a `script`.

    Unset sources are omitted from the body, so `TermsAggregation("acme")`
    renders `{"terms": {}}`.
    """

    def __init__(
        self,
        name: str,
        field: Optional[str] = None,
        script: Optional[Any] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(name, parameters)
        self.field = field
        self.script = script

    def _body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.field is not None:
            body["field"] = self.field
        if self.script is not None:
            body["script"] = self.script
        return body
