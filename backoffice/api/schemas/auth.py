"""
Pydantic schemas for authentication
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Schema for login request"""
    username: str
    password: str


class AuthResponse(BaseModel):
    """Schema for login response"""
    token: str
    username: str
    role: str
