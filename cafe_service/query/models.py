from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CafeQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1)
    count: int | None = Field(default=None, ge=0, description="None means no limit")
    search: str = ""
