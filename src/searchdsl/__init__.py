"""
searchdsl - a builder for structured search requests.

This module provides the main entry points:

- **Search**: The request object holding every optional section of a search body.
- **Queries**: `BoolQuery` and a catalogue of leaf queries.
- **Aggregations, Sorts, Suggest, Highlight, Inner hits**: The other request parts.
- **OrderedSerializer**: Deterministic normalization of the rendered body.

Example:
    >>> from searchdsl import Search, MatchQuery
    >>> Search().add_query(MatchQuery("title", "apollo")).set_size(5).to_dict()
    {'query': {'bool': {'must': [{'match': {'title': {'query': 'apollo'}}}]}}, 'size': 5}
"""

# --- Request ---
from .search import Search as Search

# --- Queries ---
from .models.query import (
    BoolQuery as BoolQuery,
    ExistsQuery as ExistsQuery,
    MatchAllQuery as MatchAllQuery,
    MatchPhraseQuery as MatchPhraseQuery,
    MatchQuery as MatchQuery,
    MultiMatchQuery as MultiMatchQuery,
    NestedQuery as NestedQuery,
    RangeQuery as RangeQuery,
    TermQuery as TermQuery,
    TermsQuery as TermsQuery,
)

# --- Aggregations ---
from .models.aggregation import (
    AvgAggregation as AvgAggregation,
    FilterAggregation as FilterAggregation,
    MaxAggregation as MaxAggregation,
    MinAggregation as MinAggregation,
    NestedAggregation as NestedAggregation,
    ReverseNestedAggregation as ReverseNestedAggregation,
    SumAggregation as SumAggregation,
    TermsAggregation as TermsAggregation,
    ValueCountAggregation as ValueCountAggregation,
)

# --- Sorts ---
from .models.sort import FieldSort as FieldSort, NestedSort as NestedSort

# --- Other request parts ---
from .models import (
    Highlight as Highlight,
    NestedInnerHit as NestedInnerHit,
    ParentInnerHit as ParentInnerHit,
    RenderableProtocol as RenderableProtocol,
    NamedRenderableProtocol as NamedRenderableProtocol,
    Suggest as Suggest,
)

# --- Serialization ---
from .serializer import (
    OrderedSerializer as OrderedSerializer,
    SerializationConfig as SerializationConfig,
    get_serializer as get_serializer,
)

# --- Enums ---
from .enum import (
    BoolType as BoolType,
    EndpointName as EndpointName,
    UriParameter as UriParameter,
)

from .errors import InvalidInputError as InvalidInputError

from .logging_config import (
    get_logger as get_logger,
    setup_sdk_logging as setup_sdk_logging,
)

__all__ = [
    # Request
    "Search",
    # Logging
    "get_logger",
    "setup_sdk_logging",
    # Queries
    "BoolQuery",
    "ExistsQuery",
    "MatchAllQuery",
    "MatchPhraseQuery",
    "MatchQuery",
    "MultiMatchQuery",
    "NestedQuery",
    "RangeQuery",
    "TermQuery",
    "TermsQuery",
    # Aggregations
    "AvgAggregation",
    "FilterAggregation",
    "MaxAggregation",
    "MinAggregation",
    "NestedAggregation",
    "ReverseNestedAggregation",
    "SumAggregation",
    "TermsAggregation",
    "ValueCountAggregation",
    # Sorts
    "FieldSort",
    "NestedSort",
    # Other request parts
    "Highlight",
    "NestedInnerHit",
    "ParentInnerHit",
    "Suggest",
    "RenderableProtocol",
    "NamedRenderableProtocol",
    # Serialization
    "OrderedSerializer",
    "SerializationConfig",
    "get_serializer",
    # Enums
    "BoolType",
    "EndpointName",
    "UriParameter",
    # Errors
    "InvalidInputError",
]


# --- Set up the top-level logger for the library ---

from logging import NullHandler

logging_config = get_logger()
logging_config.addHandler(NullHandler())
