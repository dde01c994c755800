from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from pythonjsonlogger import jsonlogger

LOG_PREFIX = "sellerstats"
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(correlation_id)s %(message)s"


@dataclass(slots=True, frozen=True)
class LogFiles:
    text_path: Path
    json_path: Path


class CorrelationIdFilter(logging.Filter):
    """Проставляет correlation_id записям, пришедшим не через адаптер (например, из сторонних логгеров)."""

    def __init__(self, correlation_id: str):
        super().__init__()
        self._correlation_id = correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = self._correlation_id
        return True


def _attach(
    root: logging.Logger,
    handler: logging.Handler,
    formatter: logging.Formatter,
    correlation_filter: CorrelationIdFilter,
) -> None:
    handler.setFormatter(formatter)
    handler.addFilter(correlation_filter)
    root.addHandler(handler)


def _reset_handlers(root: logging.Logger) -> None:
    # файловые хендлеры прошлого запуска держат открытые дескрипторы
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def configure_logging(log_dir: Path, correlation_id: str, level: int = logging.INFO) -> LogFiles:
    """
    Один запуск анализа = один correlation_id во всех записях.
    Пишет в stderr, в дневной текстовый лог и в дневной JSONL.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    utc_day = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    files = LogFiles(
        text_path=log_dir / f"{LOG_PREFIX}-{utc_day}.log",
        json_path=log_dir / f"{LOG_PREFIX}-{utc_day}.jsonl",
    )

    root = logging.getLogger()
    _reset_handlers(root)
    root.setLevel(level)

    correlation_filter = CorrelationIdFilter(correlation_id)
    text_formatter = logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    _attach(root, logging.StreamHandler(), text_formatter, correlation_filter)
    _attach(root, logging.FileHandler(files.text_path, encoding="utf-8"), text_formatter, correlation_filter)
    _attach(
        root,
        logging.FileHandler(files.json_path, encoding="utf-8"),
        jsonlogger.JsonFormatter(fmt=JSON_FORMAT),
        correlation_filter,
    )
    return files


def get_logger(name: str, correlation_id: str) -> logging.LoggerAdapter:
    return logging.LoggerAdapter(logging.getLogger(name), extra={"correlation_id": correlation_id})
