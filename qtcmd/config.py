"""
qtcmd.config - Runtime settings

Settings for the HTTP client and logging, with defaults that can be
overridden through QTCMD_* environment variables. These never feed option
values; the command line is the only source for those.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Resolved runtime settings"""

    api_host: str = "qiita.com"
    api_prefix: str = "/api/v2"
    timeout: float = 10.0
    verify_ssl: bool = True
    max_retries: int = 3
    log_level: str = "warning"
    log_file: Optional[str] = None

    @property
    def base_url(self) -> str:
        return f"https://{self.api_host}{self.api_prefix}"


def _get_number(environ: Mapping[str, str], key: str, default, cast, allow_zero: bool = True):
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logging.warning("Invalid %s value %r, using default %s", key, raw, default)
        return default
    # NaN fails both comparisons
    if not (value >= 0 if allow_zero else value > 0):
        logging.warning("Out of range %s value %r, using default %s", key, raw, default)
        return default
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from defaults and environment overrides

    Args:
        environ: Environment mapping, os.environ when omitted

    Returns:
        Settings: Resolved settings
    """
    if environ is None:
        environ = os.environ

    settings = Settings()

    if environ.get("QTCMD_API_HOST"):
        settings.api_host = environ["QTCMD_API_HOST"].strip()

    settings.timeout = _get_number(
        environ, "QTCMD_TIMEOUT", settings.timeout, float, allow_zero=False
    )
    settings.max_retries = _get_number(environ, "QTCMD_MAX_RETRIES", settings.max_retries, int)

    if environ.get("QTCMD_VERIFY_SSL"):
        settings.verify_ssl = environ["QTCMD_VERIFY_SSL"].strip().lower() in TRUE_VALUES

    if environ.get("QTCMD_LOG_LEVEL"):
        level = environ["QTCMD_LOG_LEVEL"].strip().lower()
        if level in ("debug", "info", "warning", "error"):
            settings.log_level = level
        else:
            logging.warning("Invalid QTCMD_LOG_LEVEL %r, using default %s", level, settings.log_level)

    if environ.get("QTCMD_LOG_FILE"):
        settings.log_file = environ["QTCMD_LOG_FILE"]

    return settings
