from enum import StrEnum


class EndpointName(StrEnum):
    """
    Names of the independently optional sections of a [`Search`][searchdsl.search.Search].

    Each value is also the key the section is rendered under in the request body,
    except for `URI_PARAMS`, which never reaches the body.
    """

    QUERY = "query"
    POST_FILTER = "post_filter"
    SORT = "sort"
    AGGREGATIONS = "aggregations"
    SUGGEST = "suggest"
    HIGHLIGHT = "highlight"
    INNER_HITS = "inner_hits"
    URI_PARAMS = "uri_params"
