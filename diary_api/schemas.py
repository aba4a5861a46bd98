from pydantic import BaseModel, Field, ConfigDict
from typing import List, Dict

# Base schemas
class BaseSchema(BaseModel):
    """Base schema for all Pydantic models to inherit from."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

# --- Posts ---
class Media(BaseSchema):
    """A media attachment within a post."""
    name: str
    type: str

class Post(BaseSchema):
    """A diary post."""
    content: str = ""
    date: str
    media: List[Media] = Field(default_factory=list)

# --- Log entries (as stored) ---
class ActivityEntry(BaseSchema):
    """A recorded physical activity. elapsed_seconds is 0 when not recorded."""
    date: str
    kind: str = Field("", alias="type", json_schema_extra={'example': "Walk"})
    elapsed_seconds: int = Field(0, alias="elapsedTime", ge=0)

class JunkFoodEntry(BaseSchema):
    """A recorded junk food event."""
    date: str
    kind: str = Field("", alias="type", json_schema_extra={'example': "Chips"})

# --- Progress (per request, never stored) ---
class ActivityResponse(BaseSchema):
    """An activity as listed in a daily progress bucket."""
    kind: str = Field(..., alias="type")
    elapsed_seconds: int = Field(..., alias="elapsedTime")

class JunkFoodResponse(BaseSchema):
    """A junk food event as listed in a daily progress bucket."""
    kind: str = Field(..., alias="type")

class DailyProgress(BaseModel):
    """Activities and junk food of a single calendar day, bucketed."""
    # Not frozen: buckets are filled in place while the report is built
    model_config = ConfigDict(populate_by_name=True)

    walks: List[ActivityResponse] = Field(default_factory=list)
    workouts: List[ActivityResponse] = Field(default_factory=list)
    junk_foods: List[JunkFoodResponse] = Field(default_factory=list, alias="junkFoods")

# Calendar date (YYYY-MM-DD) -> progress for that day
ProgressReport = Dict[str, DailyProgress]
