from pydantic import BaseModel, Field, TypeAdapter
from typing import List, Optional


class Project(BaseModel):
    model_config = {
        "extra": "ignore",
    }

    name: str
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = Field(default=0, ge=0)
    forks_count: int = Field(default=0, ge=0)
    html_url: Optional[str] = None
    updated_at: Optional[str] = None


PROJECT_LIST = TypeAdapter(List[Project])


def parse_projects(payload) -> List[Project]:
    """Validate a decoded JSON body as an ordered list of projects.

    Raises pydantic.ValidationError when the body is not a list of
    project records.
    """
    return PROJECT_LIST.validate_python(payload)
