"""
Submission and moderation models
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_FIELDS = ("projectName", "creatorName", "email", "category", "description")


class Submission(BaseModel):
    """A project entry posted by the showcase form. Lives for one request only."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    project_name: str = Field(default="", alias="projectName")
    creator_name: str = Field(default="", alias="creatorName")
    email: str = Field(default="", alias="email")
    project_url: Optional[str] = Field(default=None, alias="projectUrl")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    category: str = Field(default="", alias="category")
    description: str = Field(default="", alias="description")
    first_project: bool = Field(default=False, alias="firstProject")

    @field_validator("project_name", "creator_name", "email", "category", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("first_project", mode="before")
    @classmethod
    def _checkbox_to_bool(cls, value: Any) -> bool:
        # HTML checkboxes post "on" when ticked
        return value is True or value == "on"

    def missing_fields(self) -> List[str]:
        """Return the JSON names of required fields that are empty."""
        data = self.model_dump(by_alias=True)
        return [name for name in REQUIRED_FIELDS if not str(data.get(name) or "").strip()]


class ModerationVerdict(BaseModel):
    approved: bool
    reason: str = ""


class DocumentSnapshot(BaseModel):
    """Decoded text of a remote file plus the SHA it was read at."""

    content: str
    sha: str
