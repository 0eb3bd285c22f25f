"""Connection settings for the Moki API."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .globals import API_KEY_ENV, API_URL_ENV, TENANT_ID_ENV


class MokiConfig(BaseModel):
    """Base url, tenant id and API key of a Moki tenant.

    Empty values are allowed here, they are rejected by the dispatcher
    when the value is actually needed.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = ""
    tenant_id: str = ""
    api_key: str = Field(default="", repr=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MokiConfig":
        """Read the settings from the environment, on every call.

        Args:
            environ: mapping to read from, defaults to `os.environ`.

        Returns:
            MokiConfig: settings built from `MOKI_API_URL`, `MOKI_TENANT_ID`
            and `MOKI_API_KEY`. Unset variables give empty strings.

        """
        if environ is None:
            environ = os.environ

        return cls(
            base_url=environ.get(API_URL_ENV, ""),
            tenant_id=environ.get(TENANT_ID_ENV, ""),
            api_key=environ.get(API_KEY_ENV, ""),
        )
