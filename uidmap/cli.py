from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable

import typer

from uidmap.common.run_id import generate_run_id
from uidmap.config import Settings, load_settings
from uidmap.domain.exceptions import UidMapOutOfRangeError
from uidmap.domain.uid_map import UniqueIdMap
from uidmap.domain.unique_id import UniqueId
from uidmap.errors import AppError
from uidmap.infra.artifacts.map_reader import readMapFile
from uidmap.infra.artifacts.report_writer import writeReportJson
from uidmap.loggingSetup import closeCommandLogger, createCommandLogger, logEvent, mapLogLevel
from uidmap.usecases.remap_usecase import RemapUseCase

app = typer.Typer(no_args_is_help=True, add_completion=False)

def ensureDir(path: str) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)

def printRunHeader(runId: str, command: str, settings: Settings, sources: list[str]) -> None:
    """
    Назначение:
        Печатает сводку параметров запуска.
    """
    typer.echo(
        f"run_id={runId} command={command} "
        f"log_level={settings.log_level} log_dir={settings.log_dir} sources={sources}"
    )

def sourceValidity(uidMap: UniqueIdMap) -> int:
    """
    Назначение:
        UIDVALIDITY исходной папки: UID из командной строки сравниваются
        с UID карты с учётом validity.

    Инварианты/гарантии:
        - readMapFile назначает всем UID source одну и ту же validity,
          поэтому достаточно первого элемента.
    """
    if len(uidMap.source) == 0:
        return 0
    return uidMap.source[0].validity

def runCommand(ctx: typer.Context, commandName: str, runner: Callable[[logging.Logger], int]) -> None:
    """
    Назначение:
        Унифицированная обвязка выполнения команд:
        - создаёт логгер + файл лога
        - печатает заголовок запуска
        - переводит AppError в exit code 2

    Входные данные:
        ctx: typer.Context
        commandName: str
        runner: Callable[[logging.Logger], int]
            Тело команды, возвращает exit code.
    """
    runId = ctx.obj["runId"]
    settings: Settings = ctx.obj["settings"]
    sources = ctx.obj["sources"]

    logger, _logFilePath = createCommandLogger(
        commandName=commandName,
        logDir=settings.log_dir,
        runId=runId,
        logLevel=settings.log_level,
    )

    exitCode = 2
    try:
        logEvent(logger, logging.INFO, runId, "core", "Command started")
        printRunHeader(runId, commandName, settings, sources)
        try:
            exitCode = runner(logger)
        except AppError as exc:
            logEvent(logger, logging.ERROR, runId, exc.category, f"{exc.code}: {exc.message}")
            typer.echo(f"ERROR: {exc.message}", err=True)
            exitCode = 2
    finally:
        logEvent(logger, logging.INFO, runId, "core", f"Command finished exit_code={exitCode}")
        closeCommandLogger(logger)

    raise typer.Exit(code=exitCode)

@app.callback()
def main(
    ctx: typer.Context,
    config: str | None = typer.Option(None, "--config", help="Path to config.yml"),
    runId: str | None = typer.Option(None, "--run-id", help="Run identifier (UUID). If omitted, generated."),
    logLevel: str | None = typer.Option(None, "--log-level", help="Log level: ERROR|WARN|INFO|DEBUG"),
    logDir: str | None = typer.Option(None, "--log-dir", help="Directory for logs."),
    reportDir: str | None = typer.Option(None, "--report-dir", help="Directory for reports."),
):
    """
    Назначение:
        Глобальная инициализация CLI:
        - генерирует/принимает run_id
        - загружает настройки (CLI > ENV > config > defaults)
        - сохраняет всё в ctx.obj для подкоманд
    """
    if not runId:
        runId = generate_run_id()

    cliOverrides = {
        "log_level": logLevel,
        "log_dir": logDir,
        "report_dir": reportDir,
    }
    loaded = load_settings(config_path=config, cli_overrides=cliOverrides)

    try:
        mapLogLevel(loaded.settings.log_level)
    except ValueError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=2)

    ensureDir(loaded.settings.log_dir)

    ctx.obj = {
        "runId": runId,
        "settings": loaded.settings,
        "sources": loaded.sources_used,
        "configPath": config,
    }

@app.command()
def pairs(
    ctx: typer.Context,
    mapFile: str = typer.Argument(..., help="Path to UID map file (YAML/JSON)"),
    asJson: bool = typer.Option(False, "--json", help="Print pairs as JSON"),
):
    """
    Print every source -> destination UID pair.
    """
    runId = ctx.obj["runId"]

    def execute(logger: logging.Logger) -> int:
        uidMap = readMapFile(mapFile)
        records = list(uidMap)
        if asJson:
            typer.echo(json.dumps([record.to_dict() for record in records], ensure_ascii=False))
        else:
            for record in records:
                typer.echo(f"{record.source} -> {record.destination}")
        logEvent(logger, logging.INFO, runId, "map", f"Pairs listed: {len(records)}")
        return 0

    runCommand(ctx, "pairs", execute)

@app.command()
def lookup(
    ctx: typer.Context,
    mapFile: str = typer.Argument(..., help="Path to UID map file (YAML/JSON)"),
    uids: list[int] = typer.Argument(..., help="Source UIDs to translate"),
    strict: bool = typer.Option(False, "--strict", help="Fail on the first UID without a mapping"),
):
    """
    Translate source UIDs into destination UIDs.
    """
    runId = ctx.obj["runId"]
    settings: Settings = ctx.obj["settings"]

    def execute(logger: logging.Logger) -> int:
        uidMap = readMapFile(mapFile)
        validity = sourceValidity(uidMap)
        requested = [UniqueId(value, validity) for value in uids]

        exitCode = 1
        payload: dict = {"meta": {"run_id": runId, "command": "lookup", "map_file": mapFile, "strict": strict}}
        try:
            try:
                result = RemapUseCase(strict=strict).run(uidMap, requested, logger, runId)
            except UidMapOutOfRangeError as exc:
                logEvent(logger, logging.ERROR, runId, "remap", str(exc))
                typer.echo(f"ERROR: {exc}", err=True)
                payload["error"] = {"code": exc.code.value, "message": str(exc), "uid": exc.uid.id}
                return exitCode

            missing = set(result.missing)
            mapped = {item.source: item.destination for item in result.mapped}
            for src in requested:
                if src in missing:
                    typer.echo(f"{src} -> (none)")
                else:
                    typer.echo(f"{src} -> {mapped[src]}")

            exitCode = 0 if result.complete else 1
            payload.update(result.to_dict())
            return exitCode
        finally:
            payload["meta"]["exit_code"] = exitCode
            reportPath = writeReportJson(payload, settings.report_dir, f"report_lookup_{runId}")
            logEvent(logger, logging.INFO, runId, "report", f"Report written: {reportPath}")

    runCommand(ctx, "lookup", execute)


if __name__ == "__main__":
    app()
