"""
Pydantic schemas for API request/response validation.
"""
from app.schemas.job import (
    TtsJobCreate,
    TtsJobUpdate,
    TtsJobGet,
    TtsJobListQuery,
    TtsJobResponse,
    TtsJobData,
    TtsJobPageData,
    TtsJobActionResponse,
    TtsJobPageActionResponse,
    ActionErrorResponse,
)

__all__ = [
    'TtsJobCreate',
    'TtsJobUpdate',
    'TtsJobGet',
    'TtsJobListQuery',
    'TtsJobResponse',
    'TtsJobData',
    'TtsJobPageData',
    'TtsJobActionResponse',
    'TtsJobPageActionResponse',
    'ActionErrorResponse',
]
