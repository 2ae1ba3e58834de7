from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class UniqueId:
    """
    Назначение:
        Value Object для UID сообщения в папке.

    Инварианты/гарантии:
        - Равенство учитывает id и validity.
        - Упорядочивание выполняется только по id.
        - id == 0 зарезервирован под INVALID.
    """

    INVALID: ClassVar["UniqueId"]

    id: int
    validity: int = 0

    @property
    def is_valid(self) -> bool:
        return self.id != 0

    def __lt__(self, other: "UniqueId") -> bool:
        if not isinstance(other, UniqueId):
            return NotImplemented
        return self.id < other.id

    def __le__(self, other: "UniqueId") -> bool:
        if not isinstance(other, UniqueId):
            return NotImplemented
        return self.id <= other.id

    def __gt__(self, other: "UniqueId") -> bool:
        if not isinstance(other, UniqueId):
            return NotImplemented
        return self.id > other.id

    def __ge__(self, other: "UniqueId") -> bool:
        if not isinstance(other, UniqueId):
            return NotImplemented
        return self.id >= other.id

    def __str__(self) -> str:
        return str(self.id)


UniqueId.INVALID = UniqueId(0)


__all__ = ["UniqueId"]
