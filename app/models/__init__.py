"""
SQLAlchemy models.
"""
from app.models.job import Base, TtsJob, JobStatus, utcnow

__all__ = ['Base', 'TtsJob', 'JobStatus', 'utcnow']
