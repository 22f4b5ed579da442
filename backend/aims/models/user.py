"""User model."""

from pydantic import EmailStr, Field

from aims.models.base import CamelModel


class UserBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    role_ids: list[str] = Field(default_factory=list)


class User(UserBase):
    id: str

    def __repr__(self) -> str:
        return f"<User {self.email}>"
