"""Custom exceptions for ciprobe."""


class CiProbeError(Exception):
    """Base exception for all ciprobe errors."""

    pass


class ConfigError(CiProbeError):
    """Exception raised while loading the task state configuration."""

    pass


class CredentialsError(CiProbeError):
    """Exception raised while resolving CI provider credentials."""

    pass


class ConfigNotFound(ConfigError):
    """Exception raised when the configuration file does not exist."""

    pass


class ConfigParseError(ConfigError):
    """Exception raised when the configuration document cannot be parsed."""

    pass


class CredentialsFormatError(CredentialsError):
    """Exception raised when a credentials string is not 'username:token'."""

    pass


class CredentialsNotFound(CredentialsError):
    """Exception raised when no source yields a complete username and token."""

    pass
