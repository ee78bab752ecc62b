import os
import re
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 23465
DEFAULT_MAX_BODY_SIZE = 50 * 1024 * 1024

_SIZE_RE = re.compile(r"^\s*(\d+)\s*(b|kb|mb|gb)?\s*$", re.IGNORECASE)
_SIZE_UNITS = {"b": 1, "kb": 1024, "mb": 1024 ** 2, "gb": 1024 ** 3}


def parse_size(value: Any) -> int:
    """Parse a byte count such as ``1048576``, ``"512kb"`` or ``"50mb"``."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid size: {value!r}")
    if isinstance(value, int):
        size = value
    else:
        match = _SIZE_RE.match(str(value))
        if not match:
            raise ValueError(f"Invalid size: {value!r}")
        number, unit = match.groups()
        size = int(number) * _SIZE_UNITS[(unit or "b").lower()]
    if size <= 0:
        raise ValueError("Size must be positive")
    return size


class Settings(BaseSettings):
    APP_NAME: str = "log-proxy"

    HOST: str = Field("0.0.0.0", alias="LOG_PROXY_HOST")
    PORT: int = Field(
        DEFAULT_PORT, validation_alias=AliasChoices("LOG_PROXY_PORT", "PORT")
    )

    # Request bodies above this many bytes are refused with 413
    MAX_BODY_SIZE: int = Field(DEFAULT_MAX_BODY_SIZE, alias="LOG_PROXY_MAX_BODY_SIZE")

    COLOR: bool = Field(True, alias="LOG_PROXY_COLOR")

    # Process diagnostics only; proxied messages always print
    LOG_LEVEL: str = Field("WARNING", alias="LOG_LEVEL")
    ACCESS_LOG: bool = Field(False, alias="LOG_PROXY_ACCESS_LOG")

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

    @field_validator("MAX_BODY_SIZE", mode="before")
    @classmethod
    def _parse_max_body_size(cls, value: Any) -> int:
        return parse_size(value)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def color_enabled(self) -> bool:
        """Color output, unless turned off here or by the NO_COLOR convention."""
        return self.COLOR and not os.getenv("NO_COLOR")


settings = Settings()
