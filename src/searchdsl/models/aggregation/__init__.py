from .base import Aggregation as Aggregation, FieldAggregation as FieldAggregation
from .bucketing import (
    FilterAggregation as FilterAggregation,
    NestedAggregation as NestedAggregation,
    ReverseNestedAggregation as ReverseNestedAggregation,
    TermsAggregation as TermsAggregation,
)
from .metric import (
    AvgAggregation as AvgAggregation,
    MaxAggregation as MaxAggregation,
    MinAggregation as MinAggregation,
    SumAggregation as SumAggregation,
    ValueCountAggregation as ValueCountAggregation,
)
