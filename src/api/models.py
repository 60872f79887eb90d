"""Pydantic models for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Request model for user login."""
    username: str
    password: str


class TokenResponse(BaseModel):
    """Response model for register and login."""
    token: str = Field(..., description="HS256 bearer token, valid for 24 hours")


class UserResponse(BaseModel):
    """Public view of a user (no password hash)."""
    id: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
    is_active: bool


class PrivateResponse(BaseModel):
    message: str
    user_id: str


class ErrorResponse(BaseModel):
    error: str
