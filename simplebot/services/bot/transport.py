"""Contract for the chat transport the bot replies through."""

from typing import Protocol

from simplebot.services.bot.types import FilePart, Reply, TextPart


class Transport(Protocol):
    """Reply primitives offered by the chat session."""

    async def send_text(self, channel_id: str, text: str) -> None: ...

    async def send_file(self, channel_id: str, data: bytes, filename: str) -> None: ...


async def send_reply(transport: Transport, channel_id: str, reply: Reply) -> None:
    """Send every reply part in order."""
    for part in reply.parts:
        if isinstance(part, TextPart):
            await transport.send_text(channel_id, part.text)
        elif isinstance(part, FilePart):
            await transport.send_file(channel_id, part.data, part.filename)
