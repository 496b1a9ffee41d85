"""
Top-level message handling.

Decides whether a message is addressed to the bot, interprets it and sends
the reply. This is the single place where unexpected failures are caught:
they are logged and, if an admin channel is configured, forwarded there
together with the stack trace. The conversation that triggered the failure
gets no reply.
"""

import logging
import traceback

from simplebot.config import settings
from simplebot.services.bot.constants import FAILURE_TEMPLATE, STACKTRACE_FILENAME
from simplebot.services.bot.interpreter import MessageInterpreter
from simplebot.services.bot.transport import Transport, send_reply
from simplebot.services.bot.types import IncomingMessage

logger = logging.getLogger(__name__)


def mention_tag(user_id: str) -> str:
    """Markup the transport uses when a message mentions a user."""
    return f"<@{user_id}>"


def strip_mention(tag: str, text: str) -> str | None:
    """Return the text after a leading mention, or None if the text does not start with it."""
    if text.startswith(tag):
        return text[len(tag):].strip()
    return None


class MessageHandler:
    """Entry point for message events from the transport."""

    def __init__(
        self,
        interpreter: MessageInterpreter,
        transport: Transport,
        bot_user_id: str,
        observed_channel_ids: set[str] | None = None,
        admin_channel: str | None = None,
    ) -> None:
        self.interpreter = interpreter
        self.transport = transport
        self.bot_user_id = bot_user_id
        if observed_channel_ids is None:
            observed_channel_ids = set(settings.observed_channel_ids)
        self.observed_channel_ids = observed_channel_ids
        self.admin_channel = admin_channel if admin_channel is not None else settings.admin_channel

    def addressed_text(self, message: IncomingMessage) -> str | None:
        """
        Extract the text the bot should answer, or None to ignore the message.

        Messages starting with the bot's mention are always answered. Other
        messages are answered in direct conversations and observed channels.
        """
        if message.sender_id == self.bot_user_id:
            return None

        text = strip_mention(mention_tag(self.bot_user_id), message.text)
        if text is not None:
            return text

        if message.is_direct or message.channel_id in self.observed_channel_ids:
            return message.text.strip()

        return None

    async def handle(self, message: IncomingMessage) -> None:
        try:
            text = self.addressed_text(message)
            if text is None:
                return

            logger.info(f"Message in {message.channel_id}: {text!r}")
            reply = await self.interpreter.interpret(text)
            if not reply:
                logger.debug("No interpretation found, not replying")
                return

            await send_reply(self.transport, message.channel_id, reply)
        except Exception as e:
            await self._handle_exception(message, e)

    async def _handle_exception(self, message: IncomingMessage, error: Exception) -> None:
        logger.exception(f"Failed to handle message in {message.channel_id}: {error}")

        if not self.admin_channel:
            return

        report = FAILURE_TEMPLATE.format(
            sender=message.sender_name or message.sender_id,
            channel=message.channel_name or message.channel_id,
            content=message.text,
        )
        stacktrace = "".join(traceback.format_exception(error))

        try:
            await self.transport.send_text(self.admin_channel, report)
            await self.transport.send_file(
                self.admin_channel, stacktrace.encode("utf-8"), STACKTRACE_FILENAME
            )
        except Exception:
            logger.exception("Failed to forward failure report to admin channel")
