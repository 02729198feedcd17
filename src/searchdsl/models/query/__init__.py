from .compound import BoolQuery as BoolQuery
from .full_text import (
    MatchQuery as MatchQuery,
    MatchPhraseQuery as MatchPhraseQuery,
    MultiMatchQuery as MultiMatchQuery,
)
from .joining import NestedQuery as NestedQuery
from .match_all import MatchAllQuery as MatchAllQuery
from .term_level import (
    ExistsQuery as ExistsQuery,
    RangeQuery as RangeQuery,
    TermQuery as TermQuery,
    TermsQuery as TermsQuery,
)
