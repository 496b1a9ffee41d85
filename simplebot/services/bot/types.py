"""Data types for inbound messages and outbound replies."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IncomingMessage:
    """One message event delivered by the transport."""

    sender_id: str
    channel_id: str
    text: str
    is_direct: bool = False
    sender_name: str | None = None
    channel_name: str | None = None


@dataclass(frozen=True)
class TextPart:
    """Plain text reply line(s)."""

    text: str


@dataclass(frozen=True)
class FilePart:
    """File attachment reply."""

    data: bytes
    filename: str


@dataclass
class Reply:
    """Ordered reply parts collected while interpreting one message."""

    parts: list[TextPart | FilePart] = field(default_factory=list)

    def text(self, text: str) -> None:
        self.parts.append(TextPart(text))

    def file(self, data: bytes, filename: str) -> None:
        self.parts.append(FilePart(data, filename))

    @property
    def texts(self) -> list[str]:
        return [part.text for part in self.parts if isinstance(part, TextPart)]

    @property
    def files(self) -> list[FilePart]:
        return [part for part in self.parts if isinstance(part, FilePart)]

    def __bool__(self) -> bool:
        return bool(self.parts)

    def __len__(self) -> int:
        return len(self.parts)
