"""
GitHub OAuth response models.
"""

from pydantic import BaseModel, ConfigDict, Field


class AccessTokenResponse(BaseModel):
    """
    Response from GitHub's access token endpoint.

    GitHub answers HTTP 200 even when it rejects a code; in that case
    access_token is absent and the error fields are populated.
    """

    access_token: str = Field(default="", description="OAuth2 access token")
    token_type: str = Field(default="", description="Token type (bearer)")
    scope: str = Field(default="", description="Comma-separated granted scopes")

    error: str | None = Field(default=None, description="GitHub error code")
    error_description: str | None = Field(default=None)
    error_uri: str | None = Field(default=None)

    model_config = ConfigDict(extra="ignore")

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)
