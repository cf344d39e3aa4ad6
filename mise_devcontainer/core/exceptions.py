"""Custom exceptions for devcontainer generation."""


class DevcontainerError(Exception):
    """Base exception for all mise-devcontainer errors."""

    pass


class ConfigError(DevcontainerError):
    """Exception raised when the project configuration cannot be loaded or saved."""

    pass


class DevcontainerWriteError(DevcontainerError):
    """Exception raised when devcontainer.json cannot be written."""

    pass
