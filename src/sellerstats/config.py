from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_TOP_PRODUCTS_LIMIT = 10
DEFAULT_REVENUE_MODEL = "simple"
DEFAULT_BONUS_MODEL = "profit"


@dataclass(slots=True)
class Settings:
    root_dir: Path
    logs_dir: Path
    log_level: int = logging.INFO
    top_products_limit: int = DEFAULT_TOP_PRODUCTS_LIMIT
    revenue_model: str = DEFAULT_REVENUE_MODEL
    bonus_model: str = DEFAULT_BONUS_MODEL

    @classmethod
    def load(cls, base_dir: Path | None = None) -> Settings:
        load_dotenv(override=False)

        root_env = os.getenv("SELLERSTATS_HOME")
        root_dir = Path(root_env).expanduser().resolve() if root_env else (base_dir or Path.cwd()).resolve()
        logs_dir = Path(os.getenv("SELLERSTATS_LOG_DIR", root_dir / "logs")).expanduser().resolve()

        log_level = cls._parse_log_level(os.getenv("SELLERSTATS_LOG_LEVEL", "INFO"))
        top_products_limit = int(os.getenv("SELLERSTATS_TOP_PRODUCTS_LIMIT", str(DEFAULT_TOP_PRODUCTS_LIMIT)))
        revenue_model = os.getenv("SELLERSTATS_REVENUE_MODEL", DEFAULT_REVENUE_MODEL).strip().lower()
        bonus_model = os.getenv("SELLERSTATS_BONUS_MODEL", DEFAULT_BONUS_MODEL).strip().lower()

        return cls(
            root_dir=root_dir,
            logs_dir=logs_dir,
            log_level=log_level,
            top_products_limit=top_products_limit,
            revenue_model=revenue_model,
            bonus_model=bonus_model,
        )

    @staticmethod
    def _parse_log_level(value: str) -> int:
        """
        Принимает имя уровня (INFO, debug) или число (20).
        Неизвестное имя откатывается на INFO.
        """
        cleaned = value.strip()
        if cleaned.isdigit():
            return int(cleaned)
        level = logging.getLevelName(cleaned.upper())
        return level if isinstance(level, int) else logging.INFO

    def ensure_directories(self) -> None:
        for path in [self.root_dir, self.logs_dir]:
            path.mkdir(parents=True, exist_ok=True)
