from typing import Any, Dict, Optional

from ..mixins import ParametersMixin
from ..protocols import RenderableProtocol
from .field_sort import FieldSort


class NestedSort(ParametersMixin):
    """
    Scopes a sort to the nested documents stored under `path`.

    The envelope carries the `path`, an optional `filter` restricting which nested
    documents take part, and an optional deeper `nested` level. When the filter
    is a [`FieldSort`][searchdsl.models.sort.FieldSort], only its field is kept
    (`{field: {}}`): the sort direction belongs to the enclosing field sort.

    Example:
        ```python
        from searchdsl import FieldSort, NestedSort

        NestedSort("foo", FieldSort("foo", "desc")).to_dict()
        # {"path": "foo", "filter": {"foo": {}}}
        ```
    """

    def __init__(
        self,
        path: str,
        filter: Optional[RenderableProtocol] = None,
        nested: Optional["NestedSort"] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        self.filter = filter
        self.nested = nested
        self._init_parameters(parameters)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"path": self.path}
        if self.filter is not None:
            if isinstance(self.filter, FieldSort):
                body["filter"] = self.filter.condition()
            else:
                body["filter"] = self.filter.to_dict()
        if self.nested is not None:
            body["nested"] = self.nested.to_dict()
        return self._process_dict(body)
