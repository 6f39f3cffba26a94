"""Configuration loading for the dues module.

Loads settings from .env file and environment variables with sensible defaults.
Validates configuration and provides clear error messages.
"""

import os
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

from dues.services.due_service import FlatMonthlyDueOracle
from dues.services.parsers import parse_amount, parse_month


@dataclass
class DuesConfig:
    """Configuration for the dues module."""

    database_url: str = "sqlite:///./dues.db"
    """SQLAlchemy database URL (default: local SQLite)"""

    log_file: str = "logs/dues.log"
    """Path to log file (default: logs/dues.log)"""

    log_level: str = "INFO"
    """Log level name for the dues logger (default: INFO)"""

    monthly_amount: Decimal | None = None
    """Flat monthly due amount (optional)"""

    start_month: date | None = None
    """First tracked month for the flat schedule (required with monthly_amount)"""

    def build_flat_oracle(self) -> FlatMonthlyDueOracle:
        """Build a flat monthly oracle from the configured schedule.

        Raises:
            ValueError: If the flat schedule is not configured
        """
        if self.monthly_amount is None or self.start_month is None:
            raise ValueError(
                "Flat dues schedule not configured. "
                "Set DUES_MONTHLY_AMOUNT and DUES_START_MONTH"
            )
        return FlatMonthlyDueOracle(self.monthly_amount, self.start_month)


def load_config() -> DuesConfig:
    """
    Load configuration from .env file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (DATABASE_URL, LOG_FILE, LOG_LEVEL, DUES_MONTHLY_AMOUNT, DUES_START_MONTH)
    2. .env file in project root
    3. Default values

    Returns:
        DuesConfig with all settings

    Raises:
        ValueError: If a configured value is invalid

    Example:
        Create .env file:
        ```
        DUES_MONTHLY_AMOUNT=500.00
        DUES_START_MONTH=2023-07
        ```

        Then call:
        ```
        config = load_config()
        oracle = config.build_flat_oracle()
        ```
    """
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    database_url = os.getenv("DATABASE_URL", "sqlite:///./dues.db")
    log_file = os.getenv("LOG_FILE", "logs/dues.log")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    raw_amount = os.getenv("DUES_MONTHLY_AMOUNT")
    raw_start = os.getenv("DUES_START_MONTH")

    monthly_amount = None
    if raw_amount:
        try:
            monthly_amount = parse_amount(raw_amount)
        except ValueError as e:
            raise ValueError(f"DUES_MONTHLY_AMOUNT is invalid: {e}") from e

    start_month = None
    if raw_start:
        try:
            start_month = parse_month(raw_start)
        except ValueError as e:
            raise ValueError(f"DUES_START_MONTH is invalid: {e}") from e

    if monthly_amount is not None and start_month is None:
        raise ValueError(
            "DUES_START_MONTH not configured. "
            "Set DUES_START_MONTH (YYYY-MM) together with DUES_MONTHLY_AMOUNT"
        )

    return DuesConfig(
        database_url=database_url,
        log_file=log_file,
        log_level=log_level,
        monthly_amount=monthly_amount,
        start_month=start_month,
    )
