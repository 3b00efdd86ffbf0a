"""Authentication routes."""

from typing import Annotated, List
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field, StringConstraints
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db import get_db
from arpreview.db.models import User
from arpreview.db.repositories.users import UserRepository
from arpreview.db.repositories.favorites import FavoriteRepository
from arpreview.auth import create_access_token, hash_password, verify_password
from arpreview.auth.middleware import CurrentUser
from arpreview.utils import get_logger

logger = get_logger("api.auth")
router = APIRouter()

MIN_PASSWORD_LENGTH = 6
USER_EXISTS = "User already exists"

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# Request/Response models
class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    name: NonBlank


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    favorites: List[str] = []


class AuthResponse(BaseModel):
    token: str
    user: UserResponse


async def _user_response(db: AsyncSession, user: User) -> UserResponse:
    favorites = await FavoriteRepository(db).get_model_ids(user.id)
    return UserResponse(**user.to_dict(favorites))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """Register a new user."""
    user_repo = UserRepository(db)

    existing = await user_repo.get_by_email(request.email)
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USER_EXISTS)

    try:
        user = await user_repo.create_user(
            email=request.email,
            name=request.name,
            password_hash=hash_password(request.password),
        )
        await db.commit()
    except IntegrityError:
        # A concurrent registration claimed the email first
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USER_EXISTS)

    logger.info(f"New user registered: {user.email}")

    return AuthResponse(
        token=create_access_token(user_id=user.id, email=user.email),
        user=UserResponse(**user.to_dict()),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """Login with email and password."""
    user = await UserRepository(db).get_by_email(request.email)

    if not user or not verify_password(request.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials"
        )

    logger.info(f"User logged in: {user.email}")

    return AuthResponse(
        token=create_access_token(user_id=user.id, email=user.email),
        user=await _user_response(db, user),
    )


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Get current user information."""
    return await _user_response(db, current_user)
