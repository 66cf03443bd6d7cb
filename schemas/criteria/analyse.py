from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


# Define data models
class CriteriaRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    criteria: str = Field(..., description="Criteria line, e.g. '10S - 3A2B1C'")


class CriteriaResponse(BaseModel):
    criteria: Dict[str, int] = Field(
        default_factory=dict,
        description="Validated class counts, including the 'rand' remainder",
    )
    sorted: Optional[str] = Field(
        default=None, description="Criteria line ordered by class count, without the remainder"
    )


class CriteriaErrorDetail(BaseModel):
    code: str
    message: str
