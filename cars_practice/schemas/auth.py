"""Pydantic schemas for signup, login and the current user."""
from pydantic import Field, field_validator

from cars_practice.schemas.base import CamelSchema

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SignupSchema(CamelSchema):
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=8)
    name: str = Field(min_length=1, max_length=255)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt hard limit: 72 bytes (UTF-8)
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginSchema(CamelSchema):
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str


class UserOutSchema(CamelSchema):
    id: int
    email: str
    name: str


class AuthOutSchema(CamelSchema):
    user: UserOutSchema
    token: str


class MeOutSchema(CamelSchema):
    user: UserOutSchema
