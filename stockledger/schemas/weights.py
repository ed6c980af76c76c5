from typing import Optional

from pydantic import BaseModel, field_validator


class Weight(BaseModel):
    id: int
    name: str
    description: Optional[str] = None


class WeightCreate(BaseModel):
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class WeightUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
