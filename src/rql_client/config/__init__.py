"""Configuration for the client.

Settings are resolved from explicit values, environment variables and .env
files (python-dotenv), in that order.

Example:
    ```python
    from rql_client.config import ClientSettings

    settings = ClientSettings.from_env()
    ```
"""

from rql_client.config.exceptions import SettingError, SettingFileError, SettingNotFoundError
from rql_client.config.resolver import SettingResolver
from rql_client.config.settings import ClientSettings, normalize_host

__all__ = [
    "ClientSettings",
    "SettingError",
    "SettingFileError",
    "SettingNotFoundError",
    "SettingResolver",
    "normalize_host",
]
