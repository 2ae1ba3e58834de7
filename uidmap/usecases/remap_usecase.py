from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from uidmap.domain.uid_map import UniqueIdMap, UniqueIdMapping
from uidmap.domain.unique_id import UniqueId
from uidmap.loggingSetup import logEvent


@dataclass
class RemapResult:
    """
    Назначение:
        Итог пересчёта набора UID исходной папки в UID папки назначения.
    """

    mapped: list[UniqueIdMapping] = field(default_factory=list)
    missing: list[UniqueId] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict[str, Any]:
        return {
            "mapped": [item.to_dict() for item in self.mapped],
            "missing": [uid.id for uid in self.missing],
            "summary": {"mapped": len(self.mapped), "missing": len(self.missing)},
        }


class RemapUseCase:
    """
    Назначение:
        Перевод UID исходной папки в UID папки назначения по UniqueIdMap.

    Инварианты/гарантии:
        - Порядок результатов совпадает с порядком входных UID.
        - strict=True использует индексированный доступ и пробрасывает
          UidMapOutOfRangeError на первом отсутствующем UID.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def run(
        self,
        uid_map: UniqueIdMap,
        uids: Iterable[UniqueId],
        logger: logging.Logger,
        run_id: str,
    ) -> RemapResult:
        result = RemapResult()
        for src in uids:
            if self.strict:
                result.mapped.append(UniqueIdMapping(src, uid_map[src]))
                continue

            found, dest = uid_map.try_get_value(src)
            if found:
                result.mapped.append(UniqueIdMapping(src, dest))
            else:
                result.missing.append(src)
                logEvent(logger, logging.WARNING, run_id, "remap", f"No destination uid for source uid {src}")

        logEvent(
            logger,
            logging.INFO,
            run_id,
            "remap",
            f"Remap finished: mapped={len(result.mapped)} missing={len(result.missing)}",
        )
        return result


__all__ = ["RemapResult", "RemapUseCase"]
