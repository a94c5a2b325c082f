"""
settings.py - Proofer Migration Settings
========================================
Single source of truth for the configuration values used by the trademark
mapper and its note / report builders.

Every value can be overridden with an environment variable so the same code
runs unchanged in a local shell and inside the migration container.

  PROOFER_LOG_LEVEL              -> root log level (DEBUG / INFO / WARNING ...)
  PROOFER_REPORT_PAGE_SIZE       -> "letter" | "a4"
  PROOFER_REPORT_MARGIN_PT       -> page margin in points (all four sides)
  PROOFER_REPORT_FONT_SIZE       -> body font size in points
  PROOFER_REPORT_TITLE_FONT_SIZE -> title font size in points
  PROOFER_DEFAULT_OWNER_COUNTRY  -> incorporation country used when the
                                    questionnaire has no country answer
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple


# Page sizes in PDF points (1/72 inch)
_PAGE_SIZES = {
    "letter": (612.0, 792.0),
    "a4":     (595.0, 842.0),
}


class ProoferMigrationSettings:
    """Centralized configuration for the Proofer migration engine."""

    # Logging
    LOG_LEVEL: str = os.getenv("PROOFER_LOG_LEVEL", "INFO")

    # Report (PDF) layout
    REPORT_PAGE_SIZE: str = os.getenv("PROOFER_REPORT_PAGE_SIZE", "letter").lower()
    REPORT_MARGIN_PT: float = float(os.getenv("PROOFER_REPORT_MARGIN_PT", "50"))
    REPORT_FONT_SIZE: float = float(os.getenv("PROOFER_REPORT_FONT_SIZE", "10"))
    REPORT_TITLE_FONT_SIZE: float = float(os.getenv("PROOFER_REPORT_TITLE_FONT_SIZE", "14"))

    # Mapper defaults
    DEFAULT_OWNER_COUNTRY: str = os.getenv("PROOFER_DEFAULT_OWNER_COUNTRY", "us")

    @classmethod
    def get_page_size(cls) -> Tuple[float, float]:
        """
        Get the report page size as (width, height) in points.

        Unknown names fall back to US Letter.
        """
        return _PAGE_SIZES.get(cls.REPORT_PAGE_SIZE, _PAGE_SIZES["letter"])


# Global settings instance
settings = ProoferMigrationSettings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for a migration run.

    Args:
        level: Level name override. If None, uses PROOFER_LOG_LEVEL.
    """
    lvl_name = (level or settings.LOG_LEVEL).upper()
    lvl = getattr(logging, lvl_name, logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at %s", lvl_name)
