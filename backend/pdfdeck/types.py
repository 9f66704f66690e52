from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import settings


class Slide(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: List[str] = Field(default_factory=list)


class Deck(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    slides: List[Slide] = Field(default_factory=list)
    slide_count: int = 0
    theme: str = settings.theme


class DocumentInfo(BaseModel):
    file_info: str
    word_count: Optional[int] = None
    page_count: Optional[int] = None


class GenerationRequest(BaseModel):
    session_id: str
    topic: Optional[str] = None
    max_slides: int = Field(default=settings.default_slide_count, ge=settings.min_slides, le=settings.max_slides)

    @field_validator("topic")
    @classmethod
    def _blank_topic_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class GenerationResponse(BaseModel):
    """Body returned by the generation service. Every field except status may be missing."""

    model_config = ConfigDict(extra="ignore")

    status: str
    message: Optional[str] = None
    presentation_url: Optional[str] = None
    slides: Optional[List[Slide]] = None
    slide_count: Optional[int] = None
    api_used: Optional[bool] = None
    fallback_used: Optional[bool] = None
    title: Optional[str] = None


class GenerationSuccess(BaseModel):
    ok: Literal[True] = True
    deck: Deck
    artifact_url: Optional[str] = None
    used_fallback: bool = False


class GenerationFailure(BaseModel):
    ok: Literal[False] = False
    message: str


GenerationOutcome = Union[GenerationSuccess, GenerationFailure]


class Notice(BaseModel):
    level: Literal["success", "warning", "error"]
    message: str
    duration_ms: int = settings.notice_duration_ms
