"""
Pydantic schemas for TTS job actions.

Field names are snake_case in Python and camelCase on the wire.
"""
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional
from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from app.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.models.job import JobStatus


class CamelModel(BaseModel):
    """Base schema accepting and emitting camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


_url_adapter = TypeAdapter(AnyUrl)


def check_url(value: str) -> str:
    """Reject malformed URLs but keep the caller's spelling."""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError('must be a valid URL') from None
    return value


UrlString = Annotated[str, AfterValidator(check_url)]


class TtsJobCreate(CamelModel):
    """Schema for creating a new TTS job."""
    input_text: str = Field(..., min_length=1, description='The text to synthesize')
    language: Optional[str] = Field(None, description="Language tag, e.g. 'en-US'")
    voice_name: Optional[str] = Field(None, description="Voice identifier, e.g. 'female-1'")
    speaking_rate: Optional[float] = Field(None, gt=0, strict=True, description='1.0 = normal speed')
    pitch: Optional[float] = Field(None, strict=True, description='Semitone offset')
    audio_format: Optional[str] = Field(None, description="'mp3', 'wav', 'ogg'")


class TtsJobUpdate(CamelModel):
    """
    Schema for updating a TTS job.

    Only fields present in the request body are applied. An omitted field is
    left untouched, an explicit null clears the column. status and
    characterCount may be omitted but never null.
    """
    id: str = Field(..., min_length=1)
    status: Optional[JobStatus] = None
    audio_url: Optional[UrlString] = None
    duration_seconds: Optional[float] = Field(None, ge=0, strict=True)
    character_count: Optional[int] = Field(None, ge=0, strict=True)
    language: Optional[str] = None
    voice_name: Optional[str] = None
    speaking_rate: Optional[float] = Field(None, gt=0, strict=True)
    pitch: Optional[float] = Field(None, strict=True)
    audio_format: Optional[str] = None
    error_message: Optional[str] = None
    completed_at: Optional[datetime] = None

    @field_validator('status', 'character_count')
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError('may be omitted but not null')
        return value

    @field_validator('completed_at')
    @classmethod
    def normalize_completed_at(cls, value):
        return to_naive_utc(value)

    def provided_changes(self) -> Dict[str, Any]:
        """
        Column values for every field the caller supplied, except id and
        completed_at (which the service resolves against status).
        """
        changes = {}
        for name in self.model_fields_set - {'id', 'completed_at'}:
            value = getattr(self, name)
            if isinstance(value, JobStatus):
                value = value.value
            changes[name] = value
        return changes

    @property
    def completed_at_provided(self) -> bool:
        return 'completed_at' in self.model_fields_set


class TtsJobGet(CamelModel):
    """Schema for fetching a single TTS job."""
    id: str = Field(..., min_length=1)


class TtsJobListQuery(CamelModel):
    """Schema for paging through the caller's TTS jobs."""
    page: int = Field(1, ge=1, strict=True)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, strict=True)


class TtsJobResponse(CamelModel):
    """Schema for job response."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    input_text: str
    language: Optional[str]
    voice_name: Optional[str]
    speaking_rate: Optional[float]
    pitch: Optional[float]
    audio_format: Optional[str]
    audio_url: Optional[str]
    duration_seconds: Optional[float]
    character_count: Optional[int]
    status: Optional[str]
    error_message: Optional[str]
    created_at: datetime
    completed_at: Optional[datetime]

    @field_serializer('created_at', 'completed_at')
    def serialize_utc(self, value: Optional[datetime]):
        # Stored values are naive UTC
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()


class TtsJobData(CamelModel):
    job: TtsJobResponse


class TtsJobPageData(CamelModel):
    items: List[TtsJobResponse]
    total: int
    page: int
    page_size: int


class TtsJobActionResponse(CamelModel):
    """Envelope for actions returning a single job."""
    success: bool = True
    data: TtsJobData


class TtsJobPageActionResponse(CamelModel):
    """Envelope for paginated job listing."""
    success: bool = True
    data: TtsJobPageData


class ActionErrorDetail(CamelModel):
    code: str
    message: str


class ActionErrorResponse(CamelModel):
    """Envelope for failed actions."""
    success: bool = False
    error: ActionErrorDetail
