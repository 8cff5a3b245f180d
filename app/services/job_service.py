"""
TTS job actions: create, update, get and list, scoped to the calling user.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import CurrentUser, require_user
from app.database import get_db
from app.exceptions import BadRequest, NotFound
from app.models.job import TtsJob, JobStatus, new_job_id, utcnow
from app.schemas.job import TtsJobCreate, TtsJobUpdate, TtsJobListQuery
from app.services.job_store import JobStore

logger = logging.getLogger(__name__)


@dataclass
class TtsJobPage:
    """One page of a user's jobs."""
    items: List[TtsJob]
    total: int
    page: int
    page_size: int


class JobService:
    """
    Job actions over a JobStore.

    Every method takes the caller as an explicit principal and fails with
    Unauthorized when it is None. Jobs owned by other users behave exactly
    like missing jobs.
    """

    def __init__(self, store: JobStore):
        self.store = store

    async def create(self, principal: Optional[CurrentUser], data: TtsJobCreate) -> TtsJob:
        """
        Record a new queued job for the caller.

        Synthesis is not started here; an external worker picks up queued
        jobs and reports back through update().
        """
        user = require_user(principal)

        job = TtsJob(
            id=new_job_id(),
            user_id=user.id,
            input_text=data.input_text,
            language=data.language,
            voice_name=data.voice_name,
            speaking_rate=data.speaking_rate,
            pitch=data.pitch,
            audio_format=data.audio_format,
            character_count=len(data.input_text),
            status=JobStatus.queued.value,
            created_at=utcnow(),
        )
        job = await self.store.insert(job)

        logger.info('Created TTS job %s for user %s (%d chars)', job.id, user.id, job.character_count)
        return job

    async def update(self, principal: Optional[CurrentUser], data: TtsJobUpdate) -> TtsJob:
        """
        Apply the fields present in data to the caller's job.

        completedAt is taken as given when supplied. Otherwise a transition
        to 'completed' stamps it with the current time. An explicit null
        completedAt is ignored in that case so completed jobs always carry
        a completion time.

        Raises:
            NotFound: job missing or owned by someone else
            BadRequest: nothing to change
        """
        user = require_user(principal)

        changes = data.provided_changes()
        if data.completed_at_provided and data.completed_at is not None:
            changes['completed_at'] = data.completed_at
        elif changes.get('status') == JobStatus.completed.value:
            changes['completed_at'] = utcnow()
        elif data.completed_at_provided:
            changes['completed_at'] = None

        if not changes:
            # Ownership is checked first so that an empty update on someone
            # else's job still reads as not found.
            if await self.store.get_owned(data.id, user.id) is None:
                logger.debug('Update of unknown job %s by user %s', data.id, user.id)
                raise NotFound()
            raise BadRequest()

        job = await self.store.update_owned(data.id, user.id, changes)
        if job is None:
            logger.debug('Update of unknown job %s by user %s', data.id, user.id)
            raise NotFound()

        logger.info('Updated TTS job %s (%s)', job.id, ', '.join(sorted(changes)))
        return job

    async def get(self, principal: Optional[CurrentUser], job_id: str) -> TtsJob:
        user = require_user(principal)

        job = await self.store.get_owned(job_id, user.id)
        if job is None:
            raise NotFound()
        return job

    async def list(self, principal: Optional[CurrentUser], query: TtsJobListQuery) -> TtsJobPage:
        """The caller's jobs, newest first."""
        user = require_user(principal)

        offset = (query.page - 1) * query.page_size
        total = await self.store.count_owned(user.id)
        items = await self.store.list_owned(user.id, limit=query.page_size, offset=offset)

        return TtsJobPage(items=items, total=total, page=query.page, page_size=query.page_size)


def get_job_service(db: AsyncSession = Depends(get_db)) -> JobService:
    """Dependency providing a JobService bound to the request's session."""
    return JobService(JobStore(db))
