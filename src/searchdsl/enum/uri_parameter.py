from enum import StrEnum


class UriParameter(StrEnum):
    """
    Allow-list of the URI (query-string) parameters accepted by the search endpoint.

    [`Search.add_uri_param()`][searchdsl.search.Search.add_uri_param] rejects any
    name that is not listed here, so a typo fails loudly instead of silently
    producing a different request.
    """

    Q = "q"
    DF = "df"
    ANALYZER = "analyzer"
    ANALYZE_WILDCARD = "analyze_wildcard"
    DEFAULT_OPERATOR = "default_operator"
    LENIENT = "lenient"
    EXPLAIN = "explain"
    SOURCE = "_source"
    SOURCE_INCLUDES = "_source_includes"
    SOURCE_EXCLUDES = "_source_excludes"
    STORED_FIELDS = "stored_fields"
    SORT = "sort"
    TRACK_SCORES = "track_scores"
    TRACK_TOTAL_HITS = "track_total_hits"
    TIMEOUT = "timeout"
    TERMINATE_AFTER = "terminate_after"
    FROM = "from"
    SIZE = "size"
    SEARCH_TYPE = "search_type"
    SCROLL = "scroll"
    ALLOW_NO_INDICES = "allow_no_indices"
    IGNORE_UNAVAILABLE = "ignore_unavailable"
    TYPED_KEYS = "typed_keys"
    PRE_FILTER_SHARD_SIZE = "pre_filter_shard_size"
    REST_TOTAL_HITS_AS_INT = "rest_total_hits_as_int"
    ROUTING = "routing"
    PREFERENCE = "preference"
    REQUEST_CACHE = "request_cache"
    BATCHED_REDUCE_SIZE = "batched_reduce_size"
    MAX_CONCURRENT_SHARD_REQUESTS = "max_concurrent_shard_requests"
    ALLOW_PARTIAL_SEARCH_RESULTS = "allow_partial_search_results"
    EXPAND_WILDCARDS = "expand_wildcards"
    SEQ_NO_PRIMARY_TERM = "seq_no_primary_term"
    VERSION = "version"
    CCS_MINIMIZE_ROUNDTRIPS = "ccs_minimize_roundtrips"
    IGNORE_THROTTLED = "ignore_throttled"

    @classmethod
    def is_allowed(cls, name: str) -> bool:
        """Returns True if `name` is a recognized URI parameter."""
        return isinstance(name, str) and name in cls._value2member_map_
