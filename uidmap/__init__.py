from .domain import (
    ErrorCode,
    UidMapInvalidArgumentError,
    UidMapOutOfRangeError,
    UniqueId,
    UniqueIdMap,
    UniqueIdMapping,
)

__all__ = [
    "ErrorCode",
    "UidMapInvalidArgumentError",
    "UidMapOutOfRangeError",
    "UniqueId",
    "UniqueIdMap",
    "UniqueIdMapping",
]
