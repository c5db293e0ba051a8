from pydantic import BaseModel, Field

from ...domain.models.role import Role


class UserRegistrationRequest(BaseModel):
    """
    DTO for user registration request.

    Field formats are checked by the registration use case, which only logs
    failures, so no pattern constraints are declared here.
    """
    username: str = Field(min_length=1, max_length=254)
    password: str = Field(min_length=1, max_length=256)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    phone: str = Field(default="", max_length=32)
    role: Role = Role.USER


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str = Field(min_length=1, max_length=254)
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
