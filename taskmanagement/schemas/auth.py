"""Authentication schemas."""
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=1)
    email: EmailStr


class LoginRequest(BaseModel):
    """Login request body."""
    username: str
    password: str


class TokenResponse(BaseModel):
    """Response containing the signed bearer token."""
    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str
