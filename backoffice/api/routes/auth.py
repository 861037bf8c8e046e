"""
Authentication Routes
"""

from fastapi import APIRouter, Depends

from backoffice.api.dependencies import get_auth_service
from backoffice.api.schemas.auth import LoginRequest, AuthResponse
from backoffice.services import AuthService

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    auth: AuthService = Depends(get_auth_service)
):
    """
    Login endpoint - Authenticate user and return JWT token.

    Updates the user's last login date on success.

    Args:
        credentials: Username and password
        auth: Authentication service

    Returns:
        Token, username and role
    """
    return auth.login(credentials.username, credentials.password)
