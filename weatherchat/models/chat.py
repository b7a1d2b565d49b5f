"""Chat transcript models."""

from dataclasses import dataclass, field
from datetime import datetime

from weatherchat.models.common import MessageId, new_message_id, utc_now


@dataclass(frozen=True)
class ChatMessage:
    text: str
    is_user: bool
    id: MessageId = field(default_factory=new_message_id)
    timestamp: datetime = field(default_factory=utc_now)
    confidence: float | None = None
    sources: tuple[str, ...] | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "is_user": self.is_user,
            "timestamp": self.timestamp.isoformat(),
            "confidence": self.confidence,
            "sources": list(self.sources) if self.sources is not None else None,
        }


@dataclass(frozen=True)
class AssistantReply:
    """Text and provenance of one assistant turn, before it joins the transcript."""

    text: str
    confidence: float
    sources: tuple[str, ...]
