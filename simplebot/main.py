import logging
import sys

from simplebot.config import settings
from simplebot.services.bot import MessageHandler, MessageInterpreter, Transport
from simplebot.services.lookup import ReferenceData, ReferenceLoader


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )


logger = logging.getLogger(__name__)


def create_message_handler(
    loader: ReferenceLoader,
    transport: Transport,
    bot_user_id: str,
) -> MessageHandler:
    """
    Load the reference data and wire up the message handler.

    The transport session and the dataset parsers behind `loader` are
    supplied by the caller.
    """
    setup_logging()
    reference = ReferenceData(loader)
    interpreter = MessageInterpreter(reference)
    handler = MessageHandler(interpreter, transport, bot_user_id)
    logger.info("simplebot ready")
    return handler
