from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Sequence

from uidmap.domain.exceptions import UidMapInvalidArgumentError, UidMapOutOfRangeError
from uidmap.domain.unique_id import UniqueId


@dataclass(frozen=True)
class UniqueIdMapping:
    """
    Назначение:
        Пара UID: сообщение в исходной папке -> сообщение в папке назначения.
    """

    source: UniqueId
    destination: UniqueId

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source.id, "destination": self.destination.id}


@dataclass(frozen=True, eq=False)
class UniqueIdMap:
    """
    Назначение:
        Позиционное соответствие между UID исходной папки и UID папки назначения
        (например, после COPY/MOVE).

    Входные данные:
        source: Sequence[UniqueId]
            UID сообщений в исходной папке.
        destination: Sequence[UniqueId]
            UID тех же сообщений в папке назначения, в том же порядке.

    Инварианты/гарантии:
        - source[i] соответствует destination[i] для i < min(len(source), len(destination)).
        - Лишние элементы более длинной последовательности игнорируются.
        - Последовательности хранятся по ссылке и не копируются; вызывающий код
          не должен изменять их, пока карта используется.
    """

    EMPTY: ClassVar["UniqueIdMap"]

    source: Sequence[UniqueId]
    destination: Sequence[UniqueId]

    def __post_init__(self) -> None:
        if self.source is None:
            raise UidMapInvalidArgumentError("source")
        if self.destination is None:
            raise UidMapInvalidArgumentError("destination")

    def try_get_value(self, src: UniqueId) -> tuple[bool, UniqueId]:
        """
        Назначение:
            Найти UID в папке назначения без исключений.

        Выходные данные:
            (found, dest)
                found=False и dest=UniqueId.INVALID, если src нет в source
                или для его позиции нет элемента в destination.

        Алгоритм:
            - Линейный поиск первого вхождения src в source (при дублях
              используется первое).
            - Позиция должна попадать в границы destination.
        """
        try:
            index = self.source.index(src)
        except ValueError:
            return False, UniqueId.INVALID

        if index >= len(self.destination):
            return False, UniqueId.INVALID

        return True, self.destination[index]

    def __getitem__(self, src: UniqueId) -> UniqueId:
        found, dest = self.try_get_value(src)
        if not found:
            raise UidMapOutOfRangeError(src)
        return dest

    def __iter__(self) -> Iterator[UniqueIdMapping]:
        for src, dest in zip(self.source, self.destination):
            yield UniqueIdMapping(src, dest)

    def __repr__(self) -> str:
        return f"UniqueIdMap(source={list(self.source)!r}, destination={list(self.destination)!r})"


UniqueIdMap.EMPTY = UniqueIdMap((), ())


__all__ = ["UniqueIdMap", "UniqueIdMapping"]
