from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from uidmap.domain.error_codes import ErrorCode


@dataclass(eq=False)
class UidMapInvalidArgumentError(ValueError):
    """
    Назначение:
        Обязательная последовательность UID не передана при создании UniqueIdMap.
    Инварианты/гарантии:
        - code установлен в ErrorCode.INVALID_ARGUMENT.
        - argument содержит имя отсутствующего аргумента (source/destination).
    """

    argument: str

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.INVALID_ARGUMENT

    def __str__(self) -> str:
        return f"Argument '{self.argument}' must not be None"


@dataclass(eq=False)
class UidMapOutOfRangeError(KeyError):
    """
    Назначение:
        Для исходного UID нет соответствия в папке назначения.
    Инварианты/гарантии:
        - code установлен в ErrorCode.OUT_OF_RANGE.
        - Возникает ровно тогда, когда try_get_value вернул бы found=False.
    """

    uid: Any

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.OUT_OF_RANGE

    def __str__(self) -> str:
        return f"No destination uid mapped for source uid {self.uid}"


__all__ = ["UidMapInvalidArgumentError", "UidMapOutOfRangeError"]
