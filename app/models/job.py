"""
TtsJob model for text-to-speech conversion requests.
"""
import uuid
import enum
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime, Integer, Float
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_job_id() -> str:
    return str(uuid.uuid4())


class JobStatus(str, enum.Enum):
    """Status states for TTS jobs."""
    queued = 'queued'
    processing = 'processing'
    completed = 'completed'
    failed = 'failed'


class TtsJob(Base):
    """
    Represents one TTS conversion request and its lifecycle state.

    Attributes:
        id: Unique job identifier (UUID)
        user_id: Owner of the job; every read and write is scoped to it
        input_text: The text to synthesize
        language: Language tag, e.g. 'en-US'
        voice_name: Voice identifier, e.g. 'female-1'
        speaking_rate: Speech rate multiplier (1.0 = normal)
        pitch: Pitch offset in semitones
        audio_format: Output container, e.g. 'mp3', 'wav', 'ogg'
        audio_url: Location of the generated audio
        duration_seconds: Length of the generated audio
        character_count: Length of input_text at creation, overridable
        status: Current job status
        error_message: Error details if failed
        created_at: Job creation timestamp
        completed_at: When the job finished
    """
    __tablename__ = 'tts_jobs'

    id = Column(String(36), primary_key=True, default=new_job_id)
    user_id = Column(String(255), nullable=False, index=True)

    input_text = Column(Text, nullable=False)
    language = Column(Text, nullable=True)
    voice_name = Column(Text, nullable=True)
    speaking_rate = Column(Float, nullable=True)
    pitch = Column(Float, nullable=True)
    audio_format = Column(Text, nullable=True)

    audio_url = Column(Text, nullable=True)
    duration_seconds = Column(Float, nullable=True)
    character_count = Column(Integer, nullable=True)

    status = Column(String(20), nullable=True, default=JobStatus.queued.value)
    error_message = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    completed_at = Column(DateTime, nullable=True)

    def __repr__(self):
        return f'<TtsJob {self.id} user={self.user_id} status={self.status}>'
