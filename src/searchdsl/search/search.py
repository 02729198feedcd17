"""
Search Request Module.

This module provides [`Search`][searchdsl.search.Search], the request object that
client code assembles before handing its rendered body to a transport.
"""

import hashlib
from typing import Any, Dict, List, Optional, Union

from ..enum import BoolType, EndpointName, UriParameter
from ..errors import InvalidInputError
from ..logging_config import get_logger
from ..models.highlight import Highlight
from ..models.protocols import NamedRenderableProtocol, RenderableProtocol
from ..models.query import BoolQuery
from ..serializer import GENERIC, SerializationConfig, get_serializer
from .endpoints import SearchEndpoint, SearchEndpointFactory
from .parameters import SearchParameters

# Set the hierarchical logger
logger = get_logger(__name__)


class Search:
    """
    A search request made of independently optional endpoints.

    Every section (query, post-filter, sort, aggregations, suggest, highlight,
    inner hits) is created on first use and contributes nothing to the output
    until then. Scalar options (`size`, `from`, `_source`, ...) are set through
    `set_*` methods, URI parameters through
    [`add_uri_param()`][searchdsl.search.Search.add_uri_param]. Every mutator
    returns the request itself.

    Rendering is deterministic: the body is normalized by the process-wide
    [`OrderedSerializer`][searchdsl.serializer.OrderedSerializer], so two requests
    with the same content render identically whatever order they were built in.

    Example:
        ```python
        from searchdsl import (
            BoolType, FieldSort, MatchQuery, Search, TermQuery, TermsAggregation,
        )

        search = (
            Search()
            .add_query(MatchQuery("title", "apollo"))
            .add_query(TermQuery("status", "published"), BoolType.FILTER)
            .add_sort(FieldSort("created", FieldSort.DESC))
            .add_aggregation(TermsAggregation("authors", "author"))
            .set_size(20)
        )

        body = search.to_dict()
        # {"query": {"bool": {"must": [...], "filter": [...]}},
        #  "sort": [{"created": {"order": "desc"}}],
        #  "aggregations": {"authors": {"terms": {"field": "author"}}},
        #  "size": 20}
        ```
    """

    def __init__(self):
        self._endpoints: Dict[EndpointName, SearchEndpoint] = {}
        self._parameters = SearchParameters()
        self._uri_params: Dict[str, Any] = {}
        get_serializer()

    def __setstate__(self, state: Dict[str, Any]):
        # An unpickled request must not assume the process-wide serializer exists
        self.__dict__.update(state)
        get_serializer()

    # --- Endpoints ---

    def _get_endpoint(self, name: EndpointName) -> SearchEndpoint:
        if name not in self._endpoints:
            self._endpoints[name] = SearchEndpointFactory.get(name)
        return self._endpoints[name]

    def get_endpoint(self, name: Union[EndpointName, str]) -> Optional[SearchEndpoint]:
        """
        Returns the endpoint object owning section `name`, if it was created.

        Raises:
            InvalidInputError: If `name` does not designate a body endpoint.
        """
        return self._endpoints.get(SearchEndpointFactory.resolve(name))

    def destroy_endpoint(self, name: Union[EndpointName, str]) -> "Search":
        """
        Resets one section to its empty default, leaving every other one untouched.

        `"uri_params"` clears the URI parameters. Destroying a section that was
        never set is a no-op.

        Raises:
            InvalidInputError: If `name` is not a known section.
        """
        if name == EndpointName.URI_PARAMS:
            self._uri_params = {}
        else:
            self._endpoints.pop(SearchEndpointFactory.resolve(name), None)
        logger.debug(f"Endpoint '{name}' destroyed")
        return self

    def add_query(
        self,
        query: RenderableProtocol,
        bool_type: Union[BoolType, str] = BoolType.MUST,
        key: Optional[str] = None,
    ) -> "Search":
        """
        Adds a clause to the root bool query, created on first call.

        Args:
            query: Any renderable query.
            bool_type: The bucket of the root bool query. Defaults to `must`.
            key: Optional key; a clause stored under the same key is replaced.

        Raises:
            InvalidInputError: If `bool_type` is not a supported bucket.
        """
        self._add_bool_clause(EndpointName.QUERY, query, bool_type, key)
        return self

    def get_queries(self) -> Optional[BoolQuery]:
        """Returns the root bool query, or None if no query was added."""
        return self._get_bool(EndpointName.QUERY)

    def add_post_filter(
        self,
        filter: RenderableProtocol,
        bool_type: Union[BoolType, str] = BoolType.MUST,
        key: Optional[str] = None,
    ) -> "Search":
        """
        Adds a clause to the root bool post-filter, created on first call.

        Post-filters are applied to the hits after aggregations are computed.

        Raises:
            InvalidInputError: If `bool_type` is not a supported bucket.
        """
        self._add_bool_clause(EndpointName.POST_FILTER, filter, bool_type, key)
        return self

    def get_post_filters(self) -> Optional[BoolQuery]:
        """Returns the root bool post-filter, or None if none was added."""
        return self._get_bool(EndpointName.POST_FILTER)

    def _add_bool_clause(
        self,
        name: EndpointName,
        clause: RenderableProtocol,
        bool_type: Union[BoolType, str],
        key: Optional[str],
    ):
        endpoint = self._endpoints.get(name) or SearchEndpointFactory.get(name)
        endpoint.add(clause, key, bool_type)
        # Registered only after a successful insertion
        self._endpoints[name] = endpoint

    def _get_bool(self, name: EndpointName) -> Optional[BoolQuery]:
        endpoint = self._endpoints.get(name)
        return endpoint.get_bool() if endpoint is not None else None

    def add_aggregation(self, aggregation: NamedRenderableProtocol) -> "Search":
        """Adds an aggregation, keyed by its name (last write wins)."""
        self._get_endpoint(EndpointName.AGGREGATIONS).add(aggregation)
        return self

    def get_aggregations(self) -> Dict[str, NamedRenderableProtocol]:
        return self._get_all(EndpointName.AGGREGATIONS)

    def add_sort(self, sort: RenderableProtocol, key: Optional[str] = None) -> "Search":
        """Appends a sort, or replaces the sort stored under `key`."""
        self._get_endpoint(EndpointName.SORT).add(sort, key)
        return self

    def get_sorts(self) -> Dict[str, RenderableProtocol]:
        return self._get_all(EndpointName.SORT)

    def add_suggest(
        self, suggest: NamedRenderableProtocol, key: Optional[str] = None
    ) -> "Search":
        """Appends a suggester, or replaces the one stored under `key`."""
        self._get_endpoint(EndpointName.SUGGEST).add(suggest, key)
        return self

    def get_suggests(self) -> Dict[str, NamedRenderableProtocol]:
        return self._get_all(EndpointName.SUGGEST)

    def add_highlight(self, highlight: Highlight) -> "Search":
        """Sets the highlight settings, replacing any previous ones."""
        self._get_endpoint(EndpointName.HIGHLIGHT).add(highlight)
        return self

    def get_highlights(self) -> Optional[Highlight]:
        endpoint = self._endpoints.get(EndpointName.HIGHLIGHT)
        return endpoint.get_highlight() if endpoint is not None else None

    def add_inner_hit(
        self, inner_hit: NamedRenderableProtocol, key: Optional[str] = None
    ) -> "Search":
        """Appends an inner hit, or replaces the one stored under `key`."""
        self._get_endpoint(EndpointName.INNER_HITS).add(inner_hit, key)
        return self

    def get_inner_hits(self) -> Dict[str, NamedRenderableProtocol]:
        return self._get_all(EndpointName.INNER_HITS)

    def _get_all(self, name: EndpointName) -> Dict[str, Any]:
        endpoint = self._endpoints.get(name)
        return endpoint.get_all() if endpoint is not None else {}

    # --- URI parameters ---

    def add_uri_param(self, name: Union[UriParameter, str], value: Any) -> "Search":
        """
        Sets a URI (query-string) parameter.

        Raises:
            InvalidInputError: If `name` is not in the
                [`UriParameter`][searchdsl.enum.UriParameter] allow-list.
        """
        if not UriParameter.is_allowed(name):
            logger.debug(f"Rejected unknown URI parameter '{name}'")
            raise InvalidInputError(f"Parameter '{name}' is not supported.")
        self._uri_params[str(name)] = value
        return self

    def get_uri_params(self) -> Dict[str, Any]:
        return dict(self._uri_params)

    # --- Scalar parameters ---

    def set_from(self, value: Optional[int]) -> "Search":
        self._parameters.from_ = value
        return self

    def get_from(self) -> Optional[int]:
        return self._parameters.from_

    def set_size(self, value: Optional[int]) -> "Search":
        self._parameters.size = value
        return self

    def get_size(self) -> Optional[int]:
        return self._parameters.size

    def set_min_score(self, value: Optional[float]) -> "Search":
        self._parameters.min_score = value
        return self

    def get_min_score(self) -> Optional[float]:
        return self._parameters.min_score

    def set_source(self, value: Union[bool, str, List[str], Dict[str, Any], None]) -> "Search":
        """
        Sets the `_source` filter.

        `True` (or `None`) keeps the engine default and renders nothing; `False`
        and `""` are rendered as-is to disable the source; any other value is
        rendered as a source filter.
        """
        self._parameters.source = value
        return self

    def get_source(self) -> Union[bool, str, List[str], Dict[str, Any], None]:
        return self._parameters.source

    def is_source(self) -> bool:
        """False only when the source was explicitly disabled (`False` or `""`)."""
        return self._parameters.is_source()

    def set_track_total_hits(self, value: Union[bool, int, None]) -> "Search":
        self._parameters.track_total_hits = value
        return self

    def is_track_total_hits(self) -> bool:
        return bool(self._parameters.track_total_hits)

    def get_track_total_hits(self) -> Union[bool, int, None]:
        return self._parameters.track_total_hits

    def set_explain(self, value: Optional[bool]) -> "Search":
        self._parameters.explain = value
        return self

    def is_explain(self) -> bool:
        return bool(self._parameters.explain)

    def set_version(self, value: Optional[bool]) -> "Search":
        self._parameters.version = value
        return self

    def is_version(self) -> bool:
        return bool(self._parameters.version)

    def set_search_after(self, value: Optional[List[Any]]) -> "Search":
        self._parameters.search_after = value
        return self

    def get_search_after(self) -> Optional[List[Any]]:
        return self._parameters.search_after

    def set_doc_value_fields(self, value: Optional[List[Any]]) -> "Search":
        self._parameters.doc_value_fields = value
        return self

    def get_doc_value_fields(self) -> Optional[List[Any]]:
        return self._parameters.doc_value_fields

    def set_stored_fields(self, value: Optional[List[str]]) -> "Search":
        self._parameters.stored_fields = value
        return self

    def get_stored_fields(self) -> Optional[List[str]]:
        return self._parameters.stored_fields

    def set_script_fields(self, value: Optional[Dict[str, Any]]) -> "Search":
        self._parameters.script_fields = value
        return self

    def get_script_fields(self) -> Optional[Dict[str, Any]]:
        return self._parameters.script_fields

    def set_indices_boost(
        self, value: Union[List[Dict[str, float]], Dict[str, float], None]
    ) -> "Search":
        self._parameters.indices_boost = value
        return self

    def get_indices_boost(self) -> Union[List[Dict[str, float]], Dict[str, float], None]:
        return self._parameters.indices_boost

    def set_scroll(self, value: Optional[str]) -> "Search":
        """
        Sets the scroll keep-alive and mirrors it into the `scroll` URI parameter.

        `None` removes both.
        """
        self._parameters.scroll = value
        if value is None:
            self._uri_params.pop(UriParameter.SCROLL.value, None)
        else:
            self.add_uri_param(UriParameter.SCROLL, value)
        get_serializer()
        return self

    def get_scroll(self) -> Optional[str]:
        return self._parameters.scroll

    # --- Rendering ---

    def to_dict(self) -> Dict[str, Any]:
        """
        Renders the request body.

        Only non-empty endpoints and set parameters are emitted; an empty request
        renders `{}`. The result is a fresh structure on every call and the
        request itself is never modified.
        """
        output: Dict[str, Any] = {}
        for name in SearchEndpointFactory.names():
            endpoint = self._endpoints.get(name)
            if endpoint is None:
                continue
            rendered = endpoint.normalize()
            if rendered is not None:
                output[name.value] = rendered
        output.update(self._parameters.to_body())
        return get_serializer().normalize(output)

    def to_json(self, config: Optional[SerializationConfig] = None) -> str:
        """Renders the request body as deterministic JSON text."""
        return get_serializer().dumps(self.to_dict(), config)

    def fingerprint(self) -> str:
        """
        Returns a SHA-256 hex digest identifying the request.

        Covers the body and the URI parameters, so it can be used as a cache key:
        equal requests have equal fingerprints regardless of build order.
        """
        payload = get_serializer().dumps(
            {
                "body": self.to_dict(),
                "uri_params": dict(self._uri_params),
            },
            SerializationConfig(sort_unknown_keys=True),
            shape=GENERIC,
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()
