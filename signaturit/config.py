# =============================================================================
# signaturit/config.py  —  Process Configuration
# =============================================================================
#
# Everything the server needs from the environment, read ONCE at startup:
#
#   SIGNATURIT_SECRET_TOKEN    → bearer token sent with every request
#   SIGNATURIT_SANDBOX         → "true" to talk to the sandbox API
#   SIGNATURIT_TRIM_TEMPLATES  → "true" to strip/drop empty template IDs
#   SIGNATURIT_LOG_LEVEL       → logging level for the server (default INFO)
#
# A .env file in the working directory is honoured as well.
#
# The resulting Settings object is handed to SignaturitClient's constructor.
# Nothing in this package reads os.environ on its own, so tests can build a
# Settings with any token/environment they like.
# =============================================================================

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SANDBOX_URL = "https://api.sandbox.signaturit.com/v3"
PRODUCTION_URL = "https://api.signaturit.com/v3"


class Settings(BaseSettings):
    """Credential, environment selector, and server options."""

    model_config = SettingsConfigDict(
        env_prefix="SIGNATURIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    secret_token: str = Field(
        ...,
        min_length=1,
        description="Bearer token for the Signaturit API.",
    )
    sandbox: bool = Field(
        default=False,
        description="Use the sandbox endpoint instead of production.",
    )
    trim_templates: bool = Field(
        default=False,
        description=(
            "Strip whitespace around template IDs and drop empty entries. "
            "When false, the comma-separated list is forwarded exactly as split."
        ),
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the tool server.",
    )

    @property
    def base_url(self) -> str:
        return SANDBOX_URL if self.sandbox else PRODUCTION_URL
