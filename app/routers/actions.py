"""
TTS job action endpoints.

Each action is a POST taking a JSON body and answering with
{"success": true, "data": ...}. Failures raised by the service are turned
into {"success": false, "error": {...}} by the handler in server.py.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from app.auth import CurrentUser, get_current_user
from app.schemas.job import (
    ActionErrorResponse,
    TtsJobActionResponse,
    TtsJobCreate,
    TtsJobData,
    TtsJobGet,
    TtsJobListQuery,
    TtsJobPageActionResponse,
    TtsJobPageData,
    TtsJobResponse,
    TtsJobUpdate,
)
from app.services.job_service import JobService, get_job_service


router = APIRouter(
    prefix='/actions',
    tags=['actions'],
    responses={
        401: {'model': ActionErrorResponse},
        404: {'model': ActionErrorResponse},
        400: {'model': ActionErrorResponse},
    },
)


def job_envelope(job) -> TtsJobActionResponse:
    return TtsJobActionResponse(data=TtsJobData(job=TtsJobResponse.model_validate(job)))


@router.post('/createTtsJob', response_model=TtsJobActionResponse)
async def create_tts_job(
    payload: TtsJobCreate,
    user: Optional[CurrentUser] = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
) -> TtsJobActionResponse:
    """
    Create a new TTS job in the queued state.

    characterCount is derived from inputText.
    """
    job = await service.create(user, payload)
    return job_envelope(job)


@router.post('/updateTtsJob', response_model=TtsJobActionResponse)
async def update_tts_job(
    payload: TtsJobUpdate,
    user: Optional[CurrentUser] = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
) -> TtsJobActionResponse:
    """
    Update status, output or synthesis settings of one of the caller's jobs.

    Typically called by the synthesis worker to report progress. Setting
    status to 'completed' without completedAt stamps the current time.
    """
    job = await service.update(user, payload)
    return job_envelope(job)


@router.post('/getTtsJob', response_model=TtsJobActionResponse)
async def get_tts_job(
    payload: TtsJobGet,
    user: Optional[CurrentUser] = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
) -> TtsJobActionResponse:
    """Get one of the caller's jobs."""
    job = await service.get(user, payload.id)
    return job_envelope(job)


@router.post('/listMyTtsJobs', response_model=TtsJobPageActionResponse)
async def list_my_tts_jobs(
    payload: Optional[TtsJobListQuery] = None,
    user: Optional[CurrentUser] = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
) -> TtsJobPageActionResponse:
    """
    List the caller's jobs with pagination.

    Returns jobs ordered by creation time (newest first).
    """
    page = await service.list(user, payload or TtsJobListQuery())
    return TtsJobPageActionResponse(
        data=TtsJobPageData(
            items=[TtsJobResponse.model_validate(job) for job in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
        )
    )
