"""Pydantic request/response schemas for the auth endpoints."""

from pydantic import Field

from storefront.shared.schemas import ApiModel, ApiRequest


class RegisterRequest(ApiRequest):
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=6, max_length=72)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "ada@example.com",
                    "password": "correct-horse",
                    "firstName": "Ada",
                    "lastName": "Lovelace",
                }
            ]
        }
    }


class LoginRequest(ApiRequest):
    email: str
    password: str


class UserResponse(ApiModel):
    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
        )


class AuthResponse(ApiModel):
    user: UserResponse
    token: str


class MeResponse(ApiModel):
    user: UserResponse
