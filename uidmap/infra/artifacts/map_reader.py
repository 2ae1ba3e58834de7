from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from uidmap.domain.uid_map import UniqueIdMap
from uidmap.domain.unique_id import UniqueId
from uidmap.errors import AppError


def _input_error(code: str, message: str, **details: Any) -> AppError:
    return AppError(category="input", code=code, message=message, details=details)


def _load_raw(path: str) -> dict:
    p = Path(path)
    if not p.exists() or not p.is_file():
        raise _input_error("MAP_FILE_NOT_FOUND", f"Map file not found: {path}", path=path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise _input_error("MAP_FILE_INVALID", f"Map file is not valid YAML/JSON: {exc}", path=path) from exc
    if not isinstance(data, dict):
        raise _input_error("MAP_FILE_INVALID", "Invalid map format: root must be object", path=path)
    return data


def _parse_validity(raw: Any, side: str) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise _input_error("MAP_VALUE_INVALID", f"Invalid uidvalidity for {side}: {raw!r}", field=f"validity.{side}")
    return raw


def _parse_uids(data: dict, side: str, validity: int) -> list[UniqueId]:
    if side not in data:
        raise _input_error("MAP_FIELD_MISSING", f"Invalid map format: '{side}' is missing", field=side)
    raw = data[side]
    if not isinstance(raw, list):
        raise _input_error("MAP_FILE_INVALID", f"Invalid map format: '{side}' must be list", field=side)

    uids: list[UniqueId] = []
    for position, value in enumerate(raw):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise _input_error(
                "MAP_VALUE_INVALID",
                f"Invalid uid in '{side}' at position {position}: {value!r}",
                field=side,
                position=position,
            )
        uids.append(UniqueId(value, validity))
    return uids


def readMapFile(path: str) -> UniqueIdMap:
    """
    Назначение:
        Загружает соответствие UID из YAML/JSON файла.

    Входные данные:
        path: str
            Файл вида {validity: {source, destination}, source: [...], destination: [...]}.

    Выходные данные:
        UniqueIdMap

    Поведение:
        - Любая ошибка формата -> AppError(category="input").
    """
    data = _load_raw(path)
    validity_raw = data.get("validity")
    if validity_raw is None:
        validity_raw = {}
    if not isinstance(validity_raw, dict):
        raise _input_error("MAP_FILE_INVALID", "Invalid map format: 'validity' must be object", field="validity")

    source = _parse_uids(data, "source", _parse_validity(validity_raw.get("source"), "source"))
    destination = _parse_uids(data, "destination", _parse_validity(validity_raw.get("destination"), "destination"))
    return UniqueIdMap(source, destination)


__all__ = ["readMapFile"]
