"""Settings for scenarios that run against the record store.

Values come from the process environment, after loading a ``.env`` file
if one is present:

    RECORD_STORE_URL=http://localhost:8000
    RECORD_STORE_TIMEOUT=30
    RECORD_STORE_SETTLE_MS=250
"""

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "RECORD_STORE_"


class RecordStoreSettings(BaseModel):
    """Connection and timing settings for record store scenarios.

    Args:
        base_url: Base URL of the record store.
        timeout: Request timeout in seconds.
        settle_ms: Delay scenarios wait after acting, before asserting.
    """

    base_url: str = Field(default="http://localhost:8000", min_length=1)
    timeout: float = Field(default=30.0, gt=0)
    settle_ms: int = Field(default=0, ge=0)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        dotenv: bool = True,
    ) -> "RecordStoreSettings":
        """Load settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            dotenv: Whether to load a ``.env`` file into ``os.environ`` first.

        Returns:
            The parsed settings; unset variables keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        if dotenv:
            load_dotenv()
        env = os.environ if environ is None else environ

        values = {}
        for name, var in (("base_url", "URL"), ("timeout", "TIMEOUT"), ("settle_ms", "SETTLE_MS")):
            raw = env.get(f"{ENV_PREFIX}{var}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls(**values)
