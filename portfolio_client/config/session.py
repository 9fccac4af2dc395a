"""Session and credential configuration settings."""

from pydantic import BaseModel, Field


class SessionSettings(BaseModel):
    """Where the credential lives and where an expired session is sent."""

    token_key: str = Field(
        default="jwt",
        min_length=1,
        description="Storage key under which the bearer token is kept",
    )

    login_path: str = Field(
        default="/login",
        description="Route of the login page",
    )

    home_path: str = Field(
        default="/rulesets",
        description="Route an authenticated user is sent to from the login page",
    )

    expired_message: str = Field(
        default="Session expired; please log in again.",
        description="Reason shown on the login page after a forced logout",
    )
