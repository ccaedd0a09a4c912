"""Multi-source resolution of client settings.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Secret values such as access tokens are never logged; only the source they
were resolved from is.

Example:
    ```python
    from rql_client.config import SettingResolver

    resolver = SettingResolver()
    host = resolver.resolve(env_var_name="RQL_CLIENT_HOST", required=True, mask_in_logs=False)
    token = resolver.resolve_from_file(env_var_name="RQL_CLIENT_TOKEN_FILE")
    ```
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from rql_client.config.exceptions import SettingFileError, SettingNotFoundError

logger = logging.getLogger(__name__)


class SettingResolver:
    """Resolve settings from explicit values, the environment and ``.env`` files.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load the .env file at all.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once, even when called from several threads."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for settings resolution")
            except Exception as e:
                # A broken .env file should not prevent explicit settings from working
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    @staticmethod
    def _mask(value: str | None) -> str:
        return "None" if value is None else "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a setting from the first source that provides it.

        Args:
            value: Explicitly provided value. Wins over every other source.
            env_var_name: Environment variable to read.
            default: Value used when no other source provides one.
            required: Raise instead of returning None when nothing is found.
            mask_in_logs: Log ``***`` instead of the resolved value.

        Returns:
            The resolved value, or None when not found and not required.

        Raises:
            SettingNotFoundError: If ``required`` and no source provides a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = self._mask(result) if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required setting not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise SettingNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a setting from a file, e.g. a mounted access token.

        The path supports ``~`` and ``$VAR`` expansion and may itself come
        from ``env_var_name``. Surrounding whitespace is stripped.

        Raises:
            SettingFileError: If ``required`` and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for setting resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise SettingFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
            logger.debug(f"Resolved setting from file: {path_obj} (***)")
            return content

        except FileNotFoundError:
            error_msg = f"Setting file not found: {path_obj}"
            if required:
                raise SettingFileError(error_msg) from None
            logger.debug(error_msg)
            return None

        except PermissionError:
            error_msg = f"Permission denied reading setting file: {path_obj}"
            if required:
                raise SettingFileError(error_msg) from None
            logger.warning(error_msg)
            return None

        except OSError as e:
            error_msg = f"Error reading setting file {path_obj}: {e}"
            if required:
                raise SettingFileError(error_msg) from e
            logger.warning(error_msg)
            return None
