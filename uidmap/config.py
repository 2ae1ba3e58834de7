from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import yaml


@dataclass(frozen=True)
class Settings:
    # Logging
    log_dir: str = "./logs"
    log_level: str = "INFO"

    # Paths
    report_dir: str = "./reports"


@dataclass(frozen=True)
class LoadedSettings:
    settings: Settings
    sources_used: list[str]


def _read_yaml_config(path: Path) -> dict:
    if not path.exists():
        return {}
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


def _env_get(name: str) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    return v.strip()


def load_settings(
    config_path: str | None,
    cli_overrides: dict,
) -> LoadedSettings:
    """
    Priority: CLI > ENV > config > defaults
    """
    sources: list[str] = []
    defaults = Settings()

    # 1) config file
    cfg: dict = {}
    if config_path:
        cfg = _read_yaml_config(Path(config_path))
        if cfg:
            sources.append("config")

    # 2) env
    env = {
        "log_dir": _env_get("UIDMAP_LOG_DIR"),
        "log_level": _env_get("UIDMAP_LOG_LEVEL"),
        "report_dir": _env_get("UIDMAP_REPORT_DIR"),
    }
    if any(v is not None for v in env.values()):
        sources.append("env")

    merged = {
        "log_dir": cfg.get("log_dir", defaults.log_dir),
        "log_level": cfg.get("log_level", defaults.log_level),
        "report_dir": cfg.get("report_dir", defaults.report_dir),
    }

    for k, v in env.items():
        if v is not None:
            merged[k] = v

    # 3) apply CLI overrides (only those explicitly passed)
    if any(v is not None for v in cli_overrides.values()):
        sources.append("cli")

    for k, v in cli_overrides.items():
        if v is None:
            continue
        merged[k] = v

    settings = Settings(
        log_dir=str(merged["log_dir"]),
        log_level=str(merged["log_level"]),
        report_dir=str(merged["report_dir"]),
    )

    return LoadedSettings(settings=settings, sources_used=sources)
