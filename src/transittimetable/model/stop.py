from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Stop(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    location: Optional[str] = None
