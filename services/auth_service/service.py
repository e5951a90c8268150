from fastapi import HTTPException, status
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from shared.security.jwt_handler import create_profile_token

from .models import Profile, UserRole
from .repository import ProfileRepository
from .schemas import ProfileCreate, ProfileLogin, TokenResponse

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthService:

    @staticmethod
    def _hash_password(password: str) -> str:
        return _pwd_context.hash(password)

    @staticmethod
    def _verify_password(plain: str, hashed: str) -> bool:
        return _pwd_context.verify(plain, hashed)

    @staticmethod
    async def register(db: AsyncSession, data: ProfileCreate, role: UserRole = UserRole.BUYER) -> Profile:
        existing = await ProfileRepository.get_by_email(db, data.email)
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already registered",
            )
        profile = Profile(
            email=data.email,
            hashed_password=AuthService._hash_password(data.password),
            full_name=data.full_name,
            role=role.value,
        )
        return await ProfileRepository.create(db, profile)

    @staticmethod
    async def login(db: AsyncSession, data: ProfileLogin) -> TokenResponse:
        profile = await ProfileRepository.get_by_email(db, data.email)
        if not profile or not AuthService._verify_password(data.password, profile.hashed_password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )
        if not profile.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Account is disabled",
            )
        token = create_profile_token(profile.id, profile.role)
        return TokenResponse(access_token=token, role=profile.role)

    @staticmethod
    async def get_profile(db: AsyncSession, profile_id: int) -> Profile:
        profile = await ProfileRepository.get_by_id(db, profile_id)
        if not profile:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
        return profile

    @staticmethod
    async def list_profiles(db: AsyncSession):
        return await ProfileRepository.list_all(db)
