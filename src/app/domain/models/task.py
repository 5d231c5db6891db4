from pydantic import BaseModel, Field


class Task(BaseModel):
    id: int = Field(description="Sequential task identifier.")
    title: str = Field(description="Human readable task title.")
    completed: bool = Field(default=False, description="Whether the task is done.")
