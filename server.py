#!/usr/bin/env python3
"""
TalkyTracker FastAPI Server

Job tracking for text-to-speech conversion requests. Signed-in users submit
text, follow each job through queued, processing, completed or failed, and
list their own history. Synthesis itself is done by an external worker.
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import APP_NAME, APP_VERSION, SERVER_HOST, SERVER_PORT, DATABASE_URL
from app.database import init_db, close_db
from app.exceptions import ActionError
from app.routers import health_router, actions_router
from app.schemas.job import ActionErrorDetail, ActionErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup:
        - Initialize database and create tables

    Shutdown:
        - Close database connections
    """
    print(f'Starting {APP_NAME} v{APP_VERSION}...')

    # Initialize database
    print(f'Initializing database ({DATABASE_URL.split("://", 1)[0]})...')
    await init_db()

    print(f'Server ready at http://{SERVER_HOST}:{SERVER_PORT}')
    print('API documentation available at /docs')

    yield

    # Shutdown
    print('Shutting down...')

    # Close database
    await close_db()

    print('Shutdown complete.')


# Create FastAPI application
app = FastAPI(
    title=APP_NAME,
    description='Job tracking for text-to-speech conversion requests.',
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.exception_handler(ActionError)
async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    """Render service failures as an unsuccessful action envelope."""
    body = ActionErrorResponse(error=ActionErrorDetail(code=exc.code, message=exc.message))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(by_alias=True))


# Register routers
app.include_router(health_router)
app.include_router(actions_router)


if __name__ == '__main__':
    uvicorn.run(
        app,
        host=SERVER_HOST,
        port=SERVER_PORT,
        reload=False,
        log_level='info',
    )
