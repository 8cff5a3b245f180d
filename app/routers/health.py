"""
Health check endpoint.
"""
import logging

from pydantic import BaseModel
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import APP_VERSION
from app.database import get_db, ping_db


router = APIRouter(tags=['health'])
logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str
    version: str
    database: bool


@router.get('/health', response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)) -> HealthResponse:
    """
    Check server health status.

    Returns server version and whether the database answers.
    """
    try:
        database_ok = await ping_db(db)
    except SQLAlchemyError:
        logger.exception('Database health check failed')
        database_ok = False

    return HealthResponse(
        status='ok' if database_ok else 'degraded',
        version=APP_VERSION,
        database=database_ok,
    )
