from __future__ import annotations

import dataclasses
import logging
import uuid
from collections.abc import Mapping
from typing import Any

from sellerstats.config import Settings
from sellerstats.core.analysis import AnalysisOptions, SalesAnalyzer
from sellerstats.core.logging import configure_logging, get_logger
from sellerstats.core.normalize import SellerSummary, round_money


class AnalysisService:
    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        options: AnalysisOptions | Mapping[str, Any] | None = None,
    ):
        self.settings = settings
        self.logger = logger
        self.options = options

    def _resolve_logger(self, correlation_id: str) -> logging.Logger | logging.LoggerAdapter:
        if self.logger is not None:
            return self.logger
        self.settings.ensure_directories()
        configure_logging(self.settings.logs_dir, correlation_id=correlation_id, level=self.settings.log_level)
        return get_logger("sellerstats.analysis", correlation_id)

    def _resolve_options(self, chunk_size: int | None) -> AnalysisOptions | Mapping[str, Any]:
        if self.options is None:
            return AnalysisOptions.from_settings(self.settings, chunk_size=chunk_size)
        if chunk_size is None:
            return self.options
        # chunk_size из вызова перекрывает переданные опции; проверка значения будет в resolve_options
        if isinstance(self.options, AnalysisOptions):
            return dataclasses.replace(self.options, chunk_size=chunk_size)
        if isinstance(self.options, Mapping):
            return {**self.options, "chunk_size": chunk_size}
        return self.options

    def run(
        self,
        data: Any,
        *,
        correlation_id: str | None = None,
        chunk_size: int | None = None,
    ) -> tuple[list[SellerSummary], dict[str, Any]]:
        correlation_id = correlation_id or uuid.uuid4().hex
        logger = self._resolve_logger(correlation_id)
        options = self._resolve_options(chunk_size)

        result = SalesAnalyzer(options, logger=logger).run(data)

        stats: dict[str, Any] = {
            "correlation_id": correlation_id,
            "sellers_total": len(result.summaries),
            "records_total": result.records_total,
            "records_skipped": result.records_skipped,
            "unknown_products": len(result.unknown_skus),
            "bonus_total": round_money(sum(summary.bonus for summary in result.summaries)),
        }
        logger.info("Analysis stats: %s", stats)
        return result.summaries, stats
