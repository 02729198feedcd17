from .endpoints import (
    AggregationsEndpoint as AggregationsEndpoint,
    HighlightEndpoint as HighlightEndpoint,
    InnerHitsEndpoint as InnerHitsEndpoint,
    PostFilterEndpoint as PostFilterEndpoint,
    QueryEndpoint as QueryEndpoint,
    SearchEndpoint as SearchEndpoint,
    SearchEndpointFactory as SearchEndpointFactory,
    SortEndpoint as SortEndpoint,
    SuggestEndpoint as SuggestEndpoint,
)
from .parameters import SearchParameters as SearchParameters
from .search import Search as Search
