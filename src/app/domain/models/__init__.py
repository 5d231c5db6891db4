from src.app.domain.models.identity import Identity
from src.app.domain.models.payloads import CreateTaskRequest
from src.app.domain.models.sidebar import (
    FooterLink,
    ProfileCard,
    SidebarView,
    SuggestedUser,
    TrendingTopic,
)
from src.app.domain.models.task import Task

__all__ = [
    "Task",
    "CreateTaskRequest",
    "Identity",
    "ProfileCard",
    "TrendingTopic",
    "SuggestedUser",
    "FooterLink",
    "SidebarView",
]
