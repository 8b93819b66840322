import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    reload: bool = False


def load_settings() -> Settings:
    host = os.environ.get("RECEIPTS_HOST", Settings.host)

    raw_port = os.environ.get("RECEIPTS_PORT", str(Settings.port))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"RECEIPTS_PORT must be an integer, got {raw_port!r}")
    if not 0 < port < 65536:
        raise ValueError(f"RECEIPTS_PORT out of range: {port}")

    log_level = os.environ.get("RECEIPTS_LOG_LEVEL", Settings.log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown RECEIPTS_LOG_LEVEL: {log_level!r}")

    reload = os.environ.get("RECEIPTS_RELOAD", "false").strip().lower() in TRUE_VALUES

    return Settings(host=host, port=port, log_level=log_level, reload=reload)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
