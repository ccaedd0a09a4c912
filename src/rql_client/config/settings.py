"""Client settings and their resolution from the environment."""

import logging
from dataclasses import dataclass, field

from rql_client.config.exceptions import SettingError
from rql_client.config.resolver import SettingResolver

logger = logging.getLogger(__name__)

HOST_ENV_VAR = "RQL_CLIENT_HOST"
TOKEN_ENV_VAR = "RQL_CLIENT_TOKEN"
TOKEN_FILE_ENV_VAR = "RQL_CLIENT_TOKEN_FILE"
TIMEOUT_ENV_VAR = "RQL_CLIENT_TIMEOUT"

DEFAULT_TIMEOUT = 30.0


def normalize_host(raw_host: str) -> str:
    """Turn a cluster host into the API base URL.

    ``https://dev.example.io/``, ``api.dev.example.io`` and ``dev.example.io``
    all become ``https://api.dev.example.io``.
    """
    host = raw_host.strip()
    if host.endswith("/"):
        host = host[:-1]
    host = host.replace("https://", "", 1).replace("http://", "", 1).replace("api.", "", 1)
    return f"https://api.{host}"


@dataclass(frozen=True)
class ClientSettings:
    """Settings needed to talk to the backend.

    Attributes:
        host: API base URL, normalized with :func:`normalize_host`.
        token: Static bearer token sent with every request, if any.
        timeout: Request timeout in seconds.
    """

    host: str
    token: str | None = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "host", normalize_host(self.host))

    @classmethod
    def from_env(
        cls,
        resolver: SettingResolver | None = None,
        *,
        host: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
    ) -> "ClientSettings":
        """Build settings from explicit values, the environment and .env files.

        Reads ``RQL_CLIENT_HOST`` (required), ``RQL_CLIENT_TOKEN`` or the file
        named by ``RQL_CLIENT_TOKEN_FILE``, and ``RQL_CLIENT_TIMEOUT``.

        Raises:
            SettingNotFoundError: If no host is configured.
            SettingError: If the timeout is not a number.
        """
        resolver = resolver or SettingResolver()

        resolved_host = resolver.resolve(value=host, env_var_name=HOST_ENV_VAR, required=True, mask_in_logs=False)
        resolved_token = resolver.resolve(value=token, env_var_name=TOKEN_ENV_VAR)
        if resolved_token is None:
            resolved_token = resolver.resolve_from_file(env_var_name=TOKEN_FILE_ENV_VAR)

        raw_timeout = resolver.resolve(
            value=None if timeout is None else str(timeout),
            env_var_name=TIMEOUT_ENV_VAR,
            default=str(DEFAULT_TIMEOUT),
            mask_in_logs=False,
        )
        try:
            resolved_timeout = float(raw_timeout)
        except ValueError:
            raise SettingError(f"Invalid timeout {raw_timeout!r} (checked env var: {TIMEOUT_ENV_VAR})") from None

        settings = cls(host=resolved_host, token=resolved_token, timeout=resolved_timeout)
        logger.debug(f"Using API host {settings.host}")
        return settings
