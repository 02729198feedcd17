from .field_sort import FieldSort as FieldSort
from .nested_sort import NestedSort as NestedSort
