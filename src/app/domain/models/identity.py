from pydantic import BaseModel, Field


class Identity(BaseModel):
    """Read-only projection of a user record owned by the identity provider."""

    user_id: str = Field(description="Provider-side user identifier.")
    username: str | None = Field(default=None, description="Explicit username, if set.")
    email_addresses: list[str] = Field(
        default_factory=list, description="All email addresses of the user."
    )
    primary_email: str | None = Field(
        default=None, description="Email address flagged as primary by the provider."
    )

    @property
    def primary_email_address(self) -> str | None:
        if self.primary_email:
            return self.primary_email
        if self.email_addresses:
            return self.email_addresses[0]
        return None

    @property
    def display_handle(self) -> str:
        """Username when set, else the local part of the primary email, else the user id."""
        if self.username:
            return self.username
        email = self.primary_email_address
        if email:
            return email.split("@")[0]
        return self.user_id
