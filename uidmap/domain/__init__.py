from .error_codes import ErrorCode
from .exceptions import UidMapInvalidArgumentError, UidMapOutOfRangeError
from .uid_map import UniqueIdMap, UniqueIdMapping
from .unique_id import UniqueId

__all__ = [
    "ErrorCode",
    "UidMapInvalidArgumentError",
    "UidMapOutOfRangeError",
    "UniqueId",
    "UniqueIdMap",
    "UniqueIdMapping",
]
