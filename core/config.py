# =============================================================================
# core/config.py - Settings for the Exa client, read from the environment
# =============================================================================
#
# ENVIRONMENT VARIABLES:
#   EXA_API_KEY    Credential sent as the x-api-key header (not validated here;
#                  the remote call fails if it is missing or wrong)
#   EXA_BASE_URL   API root, default https://api.exa.ai
#   EXA_TIMEOUT    Per-request timeout in seconds, default 30
#
# .env files are loaded by the process entry points (tools/mcp_server.py and
# main.py) via python-dotenv, so by the time a client is built they are
# already part of os.environ.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.exa.ai"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ExaSettings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExaSettings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises ValueError if EXA_TIMEOUT is not a positive number.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("EXA_TIMEOUT", "").strip()
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"EXA_TIMEOUT must be a number, got {raw_timeout!r}") from None
            if timeout <= 0:
                raise ValueError(f"EXA_TIMEOUT must be positive, got {raw_timeout!r}")

        return cls(
            api_key=env.get("EXA_API_KEY", ""),
            base_url=env.get("EXA_BASE_URL", "").strip() or DEFAULT_BASE_URL,
            timeout=timeout,
        )
