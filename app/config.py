# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Localization
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "ar")

# Logging
_LOGS_DIR = os.getenv("MTCIT_LOGS_DIR", None)
_CONSOLE_LOG_LEVEL = getattr(logging, os.getenv("CONSOLE_LOG_LEVEL", "INFO").upper(), logging.INFO)

# Eligibility batch resolution
_ELIGIBILITY_MAX_WORKERS = int(os.getenv("ELIGIBILITY_MAX_WORKERS", "4"))


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "MTCIT Transactions"
    APP_TITLE: str = "Maritime Transactions Wizard Core"
    APP_TITLE_AR: str = "نواة معالج المعاملات البحرية"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    # If .env not found, uses default (http://localhost:8080)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Localization
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE
    SUPPORTED_LANGUAGES: tuple = ("ar", "en")

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    CONSOLE_LOG_LEVEL: int = _CONSOLE_LOG_LEVEL

    # Field validation
    PASSWORD_MIN_LENGTH: int = 6
    PHONE_MIN_DIGITS: int = 8
    DATE_FORMAT: str = "%Y-%m-%d"

    # Rule thresholds (meters / gross tonnage)
    INSPECTION_DOCUMENT_MAX_LENGTH: float = 24.0
    IMO_REQUIRED_ABOVE_TONNAGE: float = 500.0
    MMSI_REQUIRED_ABOVE_TONNAGE: float = 300.0
    MIN_MANUFACTURER_YEAR: int = 1900

    # Eligibility
    ELIGIBILITY_MAX_WORKERS: int = _ELIGIBILITY_MAX_WORKERS
    NEW_UNIT_ID_PREFIX: str = "new_"
