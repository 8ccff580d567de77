"""Person Schemas: Pydantic models for the /people API boundary.

Invariants:
    - PersonDTO.name: stripped, 2-30 chars, non-blank
    - PersonDTO.age: integer in 0..MAX_AGE (fits a 32-bit INTEGER column)
    - PersonDTO exposes only mapped fields (no id, flags or timestamps)
    - PersonErrorResponse is the body of every error response
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_AGE = 150


class PersonDTO(BaseModel):
    """Wire representation of a person, read from ORM objects by attribute."""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    name: str = Field(min_length=2, max_length=30)
    age: int = Field(ge=0, le=MAX_AGE)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        # length limits apply to the stripped value
        return v.strip() if isinstance(v, str) else v


class PersonErrorResponse(BaseModel):
    """Error payload shared by all failure responses."""
    message: str
    timestamp: datetime
