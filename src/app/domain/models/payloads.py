from pydantic import BaseModel, ConfigDict, Field


class CreateTaskRequest(BaseModel):
    """Body accepted by the task creation endpoint."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, description="Title of the new task.")
