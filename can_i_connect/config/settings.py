"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from can_i_connect.domain.models import DEFAULT_TIMEOUT

ENV_PATH = Path(os.getenv('CAN_I_CONNECT_ENV_FILE', '.env'))
load_dotenv(dotenv_path=ENV_PATH)


def _optional_path(name: str) -> Optional[Path]:
    value = os.getenv(name, '').strip()
    return Path(value) if value else None


class Settings:
    """Process-wide defaults. Command-line flags take precedence."""

    # ── Probing ────────────────────────────────────────────────────────────
    # Seconds; used when neither --timeout nor a request body sets one.
    DEFAULT_TIMEOUT: str = os.getenv('DEFAULT_TIMEOUT', str(DEFAULT_TIMEOUT))

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL:     str            = os.getenv('LOG_LEVEL', 'info')
    LOG_DIR:       Optional[Path] = _optional_path('LOG_DIR')
    LOG_FILE_NAME: str            = os.getenv('LOG_FILE_NAME', 'can-i-connect.jsonl')

    # ── Build / metrics ────────────────────────────────────────────────────
    GIT_HASH:          str = os.getenv('GIT_HASH', 'unknown')
    METRICS_NAMESPACE: str = os.getenv('METRICS_NAMESPACE', 'can_i_connect')


settings = Settings()
