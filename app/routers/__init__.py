"""
FastAPI routers.
"""
from app.routers.health import router as health_router
from app.routers.actions import router as actions_router

__all__ = ['health_router', 'actions_router']
