"""
User endpoints.

Registration and login are open; everything under ``/users/me`` acts
on the authenticated caller.  Password hashes never leave the service
layer: responses use ``UserRead``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.security import create_access_token, get_current_username
from ...schemas.common import OperationResult
from ...schemas.user import PasswordChange, TokenResponse, UserCreate, UserLogin, UserRead, UserUpdate
from ...services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED, summary="Register")
async def register_user(user: UserCreate) -> UserRead:
    """Create an account.

    A username or email that is already taken is rejected by the
    database and surfaces as a server error.
    """
    return UserRead.model_validate(await UserService.register_user(user))


@router.post("/login", response_model=TokenResponse, summary="Obtain a bearer token")
async def login_user(credentials: UserLogin) -> TokenResponse:
    user = await UserService.authenticate(credentials.username, credentials.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return TokenResponse(access_token=create_access_token(user.username))


@router.get("", response_model=List[UserRead], summary="All users by username")
async def list_users(username: str = Depends(get_current_username)) -> List[UserRead]:
    return [UserRead.model_validate(user) for user in await UserService.get_all_users()]


@router.get("/me", response_model=UserRead, summary="Caller's profile")
async def read_me(username: str = Depends(get_current_username)) -> UserRead:
    return UserRead.model_validate(await UserService.get_user_by_username(username))


@router.post("/me", response_model=UserRead, summary="Update caller's profile")
async def update_me(data: UserUpdate, username: str = Depends(get_current_username)) -> UserRead:
    return UserRead.model_validate(await UserService.update_profile(username, data))


@router.post("/me/password", response_model=OperationResult, summary="Change caller's password")
async def change_password(data: PasswordChange, username: str = Depends(get_current_username)) -> OperationResult:
    await UserService.change_password(username, data)
    return OperationResult(success=True, message="Password changed")
