from .config import SerializationConfig as SerializationConfig
from .ordered_serializer import (
    GENERIC as GENERIC,
    SEARCH as SEARCH,
    OrderedSerializer as OrderedSerializer,
    get_serializer as get_serializer,
    reset_serializer as reset_serializer,
)
