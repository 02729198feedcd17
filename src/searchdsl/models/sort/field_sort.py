from typing import Any, Dict, Optional

from ..mixins import ParametersMixin
from ..protocols import RenderableProtocol


class FieldSort(ParametersMixin):
    """
    Sorts hits by the value of `field`.

    Example Output:
        `{"price": {"order": "asc", "mode": "min"}}`
    """

    ASC = "asc"
    DESC = "desc"

    def __init__(
        self,
        field: str,
        order: Optional[str] = None,
        nested: Optional[RenderableProtocol] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            field: The field to sort on (or a special key such as `_score`).
            order: `"asc"` or `"desc"`; omitted when None.
            nested: Optional [`NestedSort`][searchdsl.models.sort.NestedSort]
                scoping the sort to nested documents.
            parameters: Extra sort options (`mode`, `missing`, `unmapped_type`, ...).
        """
        self.field = field
        self.order = order
        self.nested = nested
        self._init_parameters(parameters)

    def condition(self) -> Dict[str, Any]:
        """
        Returns the sort reduced to its field, without direction or options.

        Used when the sort acts as the filter of a nested sort.
        """
        return {self.field: {}}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.order:
            body["order"] = self.order
        if self.nested is not None:
            body["nested"] = self.nested.to_dict()
        return {self.field: self._process_dict(body)}
