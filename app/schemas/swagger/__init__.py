from .load_swagger_request import LoadSwaggerRequest
from .endpoint_record import (
    EndpointOverview,
    EndpointRecord,
    HeaderInfo,
    ParameterCount,
    ParameterGroups,
    ParameterInfo,
    RequestBodyInfo,
    RequestMediaInfo,
    RequiredParameter,
    ResponseInfo,
    ResponseMediaInfo,
)
from .pagination import PaginationInfo

__all__ = [
    "LoadSwaggerRequest",
    "EndpointOverview",
    "EndpointRecord",
    "HeaderInfo",
    "ParameterCount",
    "ParameterGroups",
    "ParameterInfo",
    "RequestBodyInfo",
    "RequestMediaInfo",
    "RequiredParameter",
    "ResponseInfo",
    "ResponseMediaInfo",
    "PaginationInfo",
]
