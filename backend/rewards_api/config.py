import logging
import os

logger = logging.getLogger(__name__)


class AppConfig:
    """Centralized application settings with environment variable overrides"""
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./rewards.db")

    _default_log_level = "INFO"
    LOG_LEVEL = os.getenv("LOG_LEVEL", _default_log_level).upper()
    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        logger.warning(
            "Invalid LOG_LEVEL value %r; falling back to default %s",
            LOG_LEVEL,
            _default_log_level,
        )
        LOG_LEVEL = _default_log_level

    @classmethod
    def connect_args(cls) -> dict:
        # SQLite connections are shared across FastAPI's worker threads
        if cls.DATABASE_URL.startswith("sqlite"):
            return {"check_same_thread": False}
        return {}


class MessageConfig:
    """User-facing error messages, overridable per deployment"""
    CUSTOMER_NOT_FOUND = os.getenv("REWARDS_CUSTOMER_NOT_FOUND_MESSAGE", "Customer not found")
    NO_TRANSACTIONS_FOUND = os.getenv("REWARDS_NO_TRANSACTIONS_FOUND_MESSAGE", "No transactions found")

    @classmethod
    def as_mapping(cls) -> dict:
        return {
            "customer_not_found": cls.CUSTOMER_NOT_FOUND,
            "no_transactions_found": cls.NO_TRANSACTIONS_FOUND,
        }
