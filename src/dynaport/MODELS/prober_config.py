"""
Runtime configuration for the port prober.
"""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

DEFAULT_HOST = "127.0.0.1"
ENV_PREFIX = "DYNAPORT_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ProberConfig(BaseModel):
    """
    Settings shared by every probe a PortProber runs.
    """
    host: str = DEFAULT_HOST
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}'")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProberConfig":
        """
        Builds a config from DYNAPORT_* environment variables.

        :param environ: Mapping to read from, defaults to os.environ.
        :return: Config with unset variables left at their defaults.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for field in cls.model_fields:
            value = environ.get(ENV_PREFIX + field.upper())
            if value:
                values[field] = value
        return cls(**values)
