from .bool_type import BoolType as BoolType
from .endpoint_name import EndpointName as EndpointName
from .uri_parameter import UriParameter as UriParameter
