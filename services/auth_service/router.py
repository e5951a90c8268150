from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.security.dependencies import get_current_user, verify_internal_api_key

from .models import UserRole
from .schemas import ProfileCreate, ProfileLogin, ProfileResponse, TokenResponse
from .service import AuthService

# Mounted under /auth by the cluster app
router = APIRouter(tags=["Authentication"])
internal_router = APIRouter(
    prefix="/profiles",
    tags=["Profiles"],
    dependencies=[Depends(verify_internal_api_key)],
)
public_router = APIRouter()

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "auth", "status": "running"}


@router.post(
    "/register",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new buyer account",
)
async def register(payload: ProfileCreate, db: AsyncSession = Depends(get_db)):
    return await AuthService.register(db, payload)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Authenticate and receive a JWT access token",
)
async def login(payload: ProfileLogin, db: AsyncSession = Depends(get_db)):
    return await AuthService.login(db, payload)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get the current authenticated user's profile",
)
async def get_me(
    user_id: str = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuthService.get_profile(db, int(user_id))


@internal_router.get("/", response_model=list[ProfileResponse])
async def list_profiles(db: AsyncSession = Depends(get_db)):
    return await AuthService.list_profiles(db)


@internal_router.post(
    "/admins",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Provision an administrator account",
)
async def create_admin(payload: ProfileCreate, db: AsyncSession = Depends(get_db)):
    return await AuthService.register(db, payload, role=UserRole.ADMIN)
