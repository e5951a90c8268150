from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Profile


class ProfileRepository:

    @staticmethod
    async def create(db: AsyncSession, profile: Profile) -> Profile:
        db.add(profile)
        await db.commit()
        await db.refresh(profile)
        return profile

    @staticmethod
    async def get_by_id(db: AsyncSession, profile_id: int) -> Optional[Profile]:
        result = await db.execute(select(Profile).where(Profile.id == profile_id))
        return result.scalars().first()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[Profile]:
        result = await db.execute(select(Profile).where(Profile.email == email))
        return result.scalars().first()

    @staticmethod
    async def list_all(db: AsyncSession):
        result = await db.execute(
            select(Profile).order_by(Profile.created_at.desc(), Profile.id.desc())
        )
        return result.scalars().all()
