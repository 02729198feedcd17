"""
Search Parameters Module.

The scalar (non-endpoint) options of a request body live in a pydantic model so
that each setter is type-checked on assignment. A rejected assignment raises
`pydantic.ValidationError` and leaves the previous value in place.
"""

from typing import Any, Dict, List, Optional, Union

import pydantic


class SearchParameters(pydantic.BaseModel):
    """
    Scalar options of a [`Search`][searchdsl.search.Search].

    Every field defaults to `None`, meaning "not set": unset fields never reach
    the rendered body. Aliases are the wire names.

    Note: Internal Usage
        This is **not a user-facing class**. It is owned by `Search` and
        accessed through its `set_*` / `get_*` methods.
    """

    model_config = pydantic.ConfigDict(validate_assignment=True, populate_by_name=True)

    from_: Optional[int] = pydantic.Field(default=None, alias="from")
    size: Optional[int] = None
    min_score: Optional[float] = None
    source: Union[bool, str, List[str], Dict[str, Any], None] = pydantic.Field(
        default=None, alias="_source"
    )
    """
    The `_source` filter. It renders in three distinct ways:

    * `None` or `True`: omitted, the engine default (full source) applies;
    * `False` or `""`: rendered verbatim, disabling the source;
    * any other value: rendered verbatim as a source filter.
    """
    track_total_hits: Union[bool, int, None] = None
    explain: Optional[bool] = None
    version: Optional[bool] = None
    search_after: Optional[List[Any]] = None
    doc_value_fields: Optional[List[Any]] = pydantic.Field(
        default=None, alias="docvalue_fields"
    )
    stored_fields: Optional[List[str]] = None
    script_fields: Optional[Dict[str, Any]] = None
    indices_boost: Union[List[Dict[str, float]], Dict[str, float], None] = None
    scroll: Optional[str] = None
    """Scroll keep-alive (e.g. `"5m"`). Sent as a URI parameter, never in the body."""

    def is_source(self) -> bool:
        return self.source is not False and self.source != ""

    def to_body(self) -> Dict[str, Any]:
        """Returns the set options keyed by their wire names."""
        body = self.model_dump(
            by_alias=True, exclude_none=True, exclude={"source", "scroll"}
        )
        if self.source is not None and self.source is not True:
            body["_source"] = self.source
        return body
