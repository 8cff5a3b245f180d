"""
Persistence for TtsJob rows.

Every query here except insert() is scoped to a user id.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import select, func, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.job import TtsJob


class JobStore:
    """Thin query layer over an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, job: TtsJob) -> TtsJob:
        self.session.add(job)
        await self.session.flush()
        await self.session.refresh(job)
        return job

    async def get_owned(self, job_id: str, user_id: str) -> Optional[TtsJob]:
        result = await self.session.execute(
            select(TtsJob).where(TtsJob.id == job_id, TtsJob.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def update_owned(
        self,
        job_id: str,
        user_id: str,
        changes: Dict[str, Any],
    ) -> Optional[TtsJob]:
        """
        Apply changes to the job if the user owns it.

        Single UPDATE ... RETURNING statement, so the ownership check, the
        write and the read of the new row cannot interleave with another
        writer. Returns None when no owned row matched.
        """
        result = await self.session.execute(
            update(TtsJob)
            .where(TtsJob.id == job_id, TtsJob.user_id == user_id)
            .values(**changes)
            .returning(TtsJob)
        )
        return result.scalar_one_or_none()

    async def count_owned(self, user_id: str) -> int:
        result = await self.session.execute(
            select(func.count(TtsJob.id)).where(TtsJob.user_id == user_id)
        )
        return result.scalar()

    async def list_owned(self, user_id: str, limit: int, offset: int) -> List[TtsJob]:
        """Jobs owned by the user, newest first."""
        result = await self.session.execute(
            select(TtsJob)
            .where(TtsJob.user_id == user_id)
            .order_by(TtsJob.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())
