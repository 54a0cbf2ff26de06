"""Settings for the signer, read from ``JWS2020_*`` environment variables.

    JWS2020_DEFAULT_FLAVOUR        -- ``Gaia-X`` (default) or ``Specification``.
    JWS2020_ALLOW_REMOTE_CONTEXTS  -- fetch contexts that are not bundled (default: true).
    JWS2020_CONTEXT_TIMEOUT        -- seconds to wait for a remote context (default: 10).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jws2020_signer.models import Flavour


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JWS2020_", case_sensitive=False, extra="ignore"
    )

    default_flavour: Flavour = Field(
        default=Flavour.GAIA_X, description="Flavour used when the caller does not pick one"
    )
    allow_remote_contexts: bool = Field(
        default=True, description="Fetch JSON-LD contexts that are not bundled over HTTP"
    )
    context_timeout: float = Field(
        default=10.0, gt=0, description="Timeout in seconds for remote context fetches"
    )
