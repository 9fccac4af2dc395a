"""HTTP client configuration settings."""

from pydantic import BaseModel, Field, field_validator


class HTTPSettings(BaseModel):
    """HTTP client configuration settings.

    Controls where requests are sent and how the underlying transport
    behaves. Timeouts live here rather than in the request layer.
    """

    base_url: str = Field(
        default="http://localhost:8080",
        description="Origin of the portfolio backend",
    )

    api_prefix: str = Field(
        default="/api",
        description="Path prefix for authenticated API endpoints",
    )

    auth_prefix: str = Field(
        default="/auth",
        description="Path prefix for unauthenticated token endpoints",
    )

    timeout_connect: float = Field(default=5.0, gt=0)
    timeout_read: float = Field(default=60.0, gt=0)
    timeout_write: float = Field(default=30.0, gt=0)
    timeout_pool: float = Field(default=30.0, gt=0)

    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates (SSL_VERIFY/REQUESTS_CA_BUNDLE still apply)",
    )

    http2: bool = Field(
        default=False,
        description="Enable HTTP/2 (requires the httpx[http2] extra)",
    )

    @field_validator("api_prefix", "auth_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Ensure a single leading slash and no trailing slash."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v
