# Authentication API routes for account registration, login, and profile lookup

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_story.config import Settings
from travel_story.db import get_app_db
from travel_story.db_handlers import UserDBHandler
from travel_story.dependencies import (
    AuthContext,
    get_auth_context,
    get_settings,
    get_token_service,
)
from travel_story.errors import (
    BadRequestError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
)
from travel_story.schemas import AuthResponse, UserInfo, UserLogin, UserRegister, UserResponse
from travel_story.utils.auth import (
    TokenService,
    get_password_hash,
    password_too_long,
    verify_password,
)
from travel_story.utils.logger import setup_logger

logger = setup_logger("api.auth")

router = APIRouter(tags=["Authentication"])


@router.post(
    "/create-account", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def create_account(
    user_data: UserRegister,
    db: AsyncSession = Depends(get_app_db),
    settings: Settings = Depends(get_settings),
    token_service: TokenService = Depends(get_token_service),
    user_db_handler: UserDBHandler = Depends(),
):
    """Register a new account and return an access token for it."""
    if not (user_data.full_name and user_data.email and user_data.password):
        raise BadRequestError("All fields are required")
    if password_too_long(user_data.password):
        raise BadRequestError("Password must be at most 72 bytes long")

    try:
        # The unique index on email catches registrations racing past this check
        existing_user = await user_db_handler.get_user_by_email(user_data.email, db=db)
        if existing_user:
            raise ConflictError("User already exists")

        hashed_password = get_password_hash(
            user_data.password, rounds=settings.bcrypt_rounds
        )
        user = await user_db_handler.create(
            {
                "full_name": user_data.full_name,
                "email": user_data.email,
                "hashed_password": hashed_password,
            },
            db=db,
        )
    except IntegrityError as e:
        raise ConflictError("User already exists") from e
    except SQLAlchemyError as e:
        logger.error(f"Registration error: {e}", exc_info=True)
        raise InternalServerError("An error occurred during registration") from e

    logger.info(f"Registered user {user.id}")
    return AuthResponse(
        user=UserInfo.model_validate(user),
        access_token=token_service.issue(user.id),
        message="Registration Successful",
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    user_data: UserLogin,
    db: AsyncSession = Depends(get_app_db),
    token_service: TokenService = Depends(get_token_service),
    user_db_handler: UserDBHandler = Depends(),
):
    """Authenticate with email and password and return a fresh access token."""
    if not (user_data.email and user_data.password):
        raise BadRequestError("Email and password are required")

    try:
        user = await user_db_handler.get_user_by_email(user_data.email, db=db)
    except SQLAlchemyError as e:
        logger.error(f"Login error: {e}", exc_info=True)
        raise InternalServerError("An error occurred during login") from e

    if user is None:
        logger.info("Login attempt for unknown email")
        raise NotFoundError("User not found")

    if not verify_password(user_data.password, user.hashed_password):
        logger.info(f"Login attempt with invalid password for user {user.id}")
        raise UnauthorizedError("Invalid password")

    return AuthResponse(
        user=UserInfo.model_validate(user),
        access_token=token_service.issue(user.id),
        message="Login successful",
    )


@router.get("/get-user", response_model=UserResponse)
async def get_user(
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_app_db),
    user_db_handler: UserDBHandler = Depends(),
):
    """Return the profile of the authenticated user."""
    try:
        user = await user_db_handler.get(auth.user_id, db=db)
    except SQLAlchemyError as e:
        logger.error(f"Get user error: {e}", exc_info=True)
        raise InternalServerError(
            "An error occurred while retrieving user data"
        ) from e

    if user is None:
        raise NotFoundError("User not found")

    return UserResponse(
        user=UserInfo.model_validate(user),
        message="User data retrieved successfully",
    )
