"""Error types shared across ciprobe."""

from .exceptions import (
    CiProbeError,
    ConfigError,
    CredentialsError,
    ConfigNotFound,
    ConfigParseError,
    CredentialsFormatError,
    CredentialsNotFound,
)

__all__ = [
    "CiProbeError",
    "ConfigError",
    "CredentialsError",
    "ConfigNotFound",
    "ConfigParseError",
    "CredentialsFormatError",
    "CredentialsNotFound",
]
