"""
Metric aggregations: single-value computations over a field or script.

Metric aggregations produce no buckets and reject child aggregations.
"""

from .base import FieldAggregation


class AvgAggregation(FieldAggregation):
    __aggregation_type__ = "avg"


class MaxAggregation(FieldAggregation):
    __aggregation_type__ = "max"


class MinAggregation(FieldAggregation):
    __aggregation_type__ = "min"


class SumAggregation(FieldAggregation):
    __aggregation_type__ = "sum"


class ValueCountAggregation(FieldAggregation):
    __aggregation_type__ = "value_count"
