# Users as returned by the remote store. Only a few fields are known;
# anything else the store sends is kept as-is.

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from .common import EntityId


class User(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: EntityId
    email: Optional[str] = None
    full_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("full_name", "fullName", "name"))
    username: Optional[str] = None
    is_active: bool = True

    @property
    def display_name(self) -> str:
        return self.full_name or self.username or self.email or str(self.id)


class UserCreate(BaseModel):
    email: EmailStr
    full_name: Optional[str] = None
    is_active: bool = True


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    full_name: Optional[str] = None
    is_active: Optional[bool] = None
