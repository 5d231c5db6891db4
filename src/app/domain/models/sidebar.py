from pydantic import BaseModel, Field


class ProfileCard(BaseModel):
    handle: str = Field(description="Display handle of the signed-in user.")
    email: str = Field(description="Primary email address of the signed-in user.")
    profile_url: str = Field(description="Link to the user's profile page.")


class TrendingTopic(BaseModel):
    tag: str
    post_count: int = Field(ge=0)

    @property
    def post_count_label(self) -> str:
        return f"{self.post_count:,} posts"


class SuggestedUser(BaseModel):
    name: str
    handle: str


class FooterLink(BaseModel):
    label: str
    href: str


class SidebarView(BaseModel):
    """Everything the sidebar component needs to render."""

    profile: ProfileCard | None = Field(
        default=None, description="Profile card, omitted for anonymous visitors."
    )
    trending: list[TrendingTopic] = Field(default_factory=list)
    suggested: list[SuggestedUser] = Field(default_factory=list)
    footer_links: list[FooterLink] = Field(default_factory=list)
    copyright: str = "© 2024 Socially"
