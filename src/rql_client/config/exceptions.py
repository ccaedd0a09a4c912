"""Exceptions raised while resolving client settings."""


class SettingError(Exception):
    """Base exception for configuration errors."""

    pass


class SettingNotFoundError(SettingError):
    """Raised when a required setting cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class SettingFileError(SettingError):
    """Raised when a setting file cannot be read."""

    pass
