from pydantic import BaseModel, Field, StringConstraints, field_validator
from typing import Annotated, Optional

# Stripped before the length check, so "  " is rejected
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Director Schemas
class DirectorBase(BaseModel):
    first_name: NonEmptyStr = Field(..., description="Director first name")
    last_name: NonEmptyStr = Field(..., description="Director last name")

class DirectorIn(DirectorBase):
    """Director as submitted by clients; resolved by name"""
    pass

class DirectorResponse(DirectorBase):
    """Director response"""
    id: int

    class Config:
        from_attributes = True

# Movie Schemas
class MovieBase(BaseModel):
    title: NonEmptyStr = Field(..., description="Movie title")
    description: str = ""
    release_year: int = Field(..., ge=0, le=32767, description="Year of release")
    poster: str = Field("", description="Poster URL or path")

    @field_validator("description", "poster", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        """Free-text fields sent as null are stored as empty strings"""
        return "" if value is None else value

class MovieCreate(MovieBase):
    """Create movie; director may be null"""
    director: Optional[DirectorIn] = None

class MovieUpdate(MovieBase):
    """Replace all mutable fields of a movie"""
    director: Optional[DirectorIn] = None

class MovieResponse(MovieBase):
    """Movie response"""
    id: int
    director: Optional[DirectorResponse] = None

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
