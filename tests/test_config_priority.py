from uidmap.config import Settings, load_settings


def test_defaults_without_sources(monkeypatch):
    for name in ("UIDMAP_LOG_DIR", "UIDMAP_LOG_LEVEL", "UIDMAP_REPORT_DIR"):
        monkeypatch.delenv(name, raising=False)

    loaded = load_settings(config_path=None, cli_overrides={"log_dir": None})

    assert loaded.settings == Settings()
    assert loaded.sources_used == []


def test_priority_cli_over_env_over_config(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yml"
    cfg.write_text(
        "\n".join([
            'log_dir: "cfg_logs"',
            'log_level: "DEBUG"',
            'report_dir: "cfg_reports"',
        ]),
        encoding="utf-8",
    )

    # ENV overrides config
    monkeypatch.setenv("UIDMAP_LOG_DIR", "env_logs")
    monkeypatch.setenv("UIDMAP_LOG_LEVEL", "WARN")
    monkeypatch.delenv("UIDMAP_REPORT_DIR", raising=False)

    # CLI overrides env
    loaded = load_settings(config_path=str(cfg), cli_overrides={"log_dir": "cli_logs", "log_level": None})

    assert loaded.settings.log_dir == "cli_logs"
    assert loaded.settings.log_level == "WARN"
    assert loaded.settings.report_dir == "cfg_reports"
    assert loaded.sources_used == ["config", "env", "cli"]


def test_blank_env_and_missing_config_are_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("UIDMAP_LOG_DIR", "   ")
    monkeypatch.delenv("UIDMAP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("UIDMAP_REPORT_DIR", raising=False)

    loaded = load_settings(config_path=str(tmp_path / "absent.yml"), cli_overrides={})

    assert loaded.settings.log_dir == "./logs"
    assert loaded.sources_used == []
