"""
Search Endpoints Module.

Each independently optional section of a request body is owned by one endpoint
object. An endpoint knows how to store the parts added to it and how to render
them under its key; the [`Search`][searchdsl.search.Search] only decides which
endpoints exist.

| Endpoint | Rendered key | Container |
| :--- | :--- | :--- |
| `QueryEndpoint` | `query` | root [`BoolQuery`][searchdsl.models.query.BoolQuery] |
| `PostFilterEndpoint` | `post_filter` | root `BoolQuery` |
| `SortEndpoint` | `sort` | keyed sorts, rendered as a list |
| `AggregationsEndpoint` | `aggregations` | aggregations keyed by name |
| `SuggestEndpoint` | `suggest` | keyed suggesters, merged into one mapping |
| `HighlightEndpoint` | `highlight` | a single highlight |
| `InnerHitsEndpoint` | `inner_hits` | inner hits keyed by name |
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from ..enum import BoolType, EndpointName
from ..errors import InvalidInputError
from ..logging_config import get_logger
from ..models.collection import KeyedCollection
from ..models.protocols import NamedRenderableProtocol, RenderableProtocol
from ..models.query import BoolQuery
from ..models.query.compound import validate_bool_type

# Set the hierarchical logger
logger = get_logger(__name__)


class SearchEndpoint(ABC):
    """
    Base class of all request sections.

    Subclasses hold their parts in a [`KeyedCollection`][searchdsl.models.KeyedCollection]
    unless they override the storage methods.
    """

    NAME: EndpointName

    def __init__(self):
        self._container: KeyedCollection[RenderableProtocol] = KeyedCollection()

    def add(self, builder: RenderableProtocol, key: Optional[str] = None):
        """Stores `builder` under `key`, or under a new auto key."""
        self._container.add(builder, key)

    def get(self, key: str) -> Optional[RenderableProtocol]:
        return self._container.get(key)

    def get_all(self) -> Dict[str, RenderableProtocol]:
        return self._container.to_mapping()

    def is_empty(self) -> bool:
        return not self._container

    @abstractmethod
    def normalize(self) -> Optional[Any]:
        """Renders the section, or returns None when there is nothing to render."""
        pass


class _BoolEndpoint(SearchEndpoint):
    """An endpoint whose clauses are merged in a lazily created root `BoolQuery`."""

    def __init__(self):
        self._bool: Optional[BoolQuery] = None

    def add(
        self,
        builder: RenderableProtocol,
        key: Optional[str] = None,
        bool_type: Union[BoolType, str] = BoolType.MUST,
    ):
        # Bucket validation runs before the root combinator is created
        bucket = validate_bool_type(bool_type)
        if self._bool is None:
            self._bool = BoolQuery()
        self._bool.add(builder, bucket, key)

    def get_bool(self) -> Optional[BoolQuery]:
        return self._bool

    def get(self, key: str) -> Optional[RenderableProtocol]:
        return self.get_all().get(key)

    def get_all(self) -> Dict[str, RenderableProtocol]:
        return self._bool.get_queries() if self._bool is not None else {}

    def is_empty(self) -> bool:
        return self._bool is None

    def normalize(self) -> Optional[Any]:
        if self._bool is None:
            return None
        return self._bool.to_dict()


class QueryEndpoint(_BoolEndpoint):
    NAME = EndpointName.QUERY


class PostFilterEndpoint(_BoolEndpoint):
    NAME = EndpointName.POST_FILTER


class SortEndpoint(SearchEndpoint):
    NAME = EndpointName.SORT

    def normalize(self) -> Optional[Any]:
        if not self._container:
            return None
        return [sort.to_dict() for sort in self._container.values()]


class AggregationsEndpoint(SearchEndpoint):
    """Aggregations are always keyed by their own name."""

    NAME = EndpointName.AGGREGATIONS

    def add(self, builder: NamedRenderableProtocol, key: Optional[str] = None):
        self._container.add(builder, builder.name())

    def normalize(self) -> Optional[Any]:
        if not self._container:
            return None
        return {name: agg.to_dict() for name, agg in self._container.items()}


class SuggestEndpoint(SearchEndpoint):
    NAME = EndpointName.SUGGEST

    def normalize(self) -> Optional[Any]:
        if not self._container:
            return None
        output: Dict[str, Any] = {}
        for suggest in self._container.values():
            output.update(suggest.to_dict())
        return output


class HighlightEndpoint(SearchEndpoint):
    """Holds at most one highlight; adding another replaces it."""

    NAME = EndpointName.HIGHLIGHT

    _KEY = "highlight"

    def add(self, builder: RenderableProtocol, key: Optional[str] = None):
        self._container.add(builder, self._KEY)

    def get_highlight(self) -> Optional[RenderableProtocol]:
        return self._container.get(self._KEY)

    def normalize(self) -> Optional[Any]:
        highlight = self.get_highlight()
        return highlight.to_dict() if highlight is not None else None


class InnerHitsEndpoint(SearchEndpoint):
    """Inner hits are rendered keyed by name; the storage key is free."""

    NAME = EndpointName.INNER_HITS

    def normalize(self) -> Optional[Any]:
        if not self._container:
            return None
        return {
            inner_hit.name(): inner_hit.to_dict()
            for inner_hit in self._container.values()
        }


class SearchEndpointFactory:
    """Creates the endpoint object that owns a given request section."""

    _ENDPOINTS: Dict[EndpointName, type] = {
        endpoint.NAME: endpoint
        for endpoint in (
            QueryEndpoint,
            PostFilterEndpoint,
            SortEndpoint,
            AggregationsEndpoint,
            SuggestEndpoint,
            HighlightEndpoint,
            InnerHitsEndpoint,
        )
    }

    @classmethod
    def names(cls):
        """Returns the endpoint names in their declared order."""
        return list(cls._ENDPOINTS)

    @classmethod
    def resolve(cls, name: Union[EndpointName, str]) -> EndpointName:
        """
        Resolves `name` to a body endpoint.

        Raises:
            InvalidInputError: If `name` does not designate a body endpoint.
        """
        try:
            resolved = EndpointName(name)
        except ValueError:
            resolved = None
        if resolved not in cls._ENDPOINTS:
            logger.debug(f"Rejected unknown endpoint '{name}'")
            raise InvalidInputError(f"Endpoint '{name}' doesn't exist.")
        return resolved

    @classmethod
    def get(cls, name: Union[EndpointName, str]) -> SearchEndpoint:
        """
        Returns a new, empty endpoint for `name`.

        Raises:
            InvalidInputError: If `name` does not designate a body endpoint.
        """
        endpoint_cls = cls._ENDPOINTS[cls.resolve(name)]
        logger.debug(f"Created endpoint '{endpoint_cls.NAME}'")
        return endpoint_cls()
