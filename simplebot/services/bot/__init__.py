"""
Bot package: message interpretation and reply assembly.

Module structure:
- handler.py: MessageHandler, the top-level boundary for transport events
- interpreter.py: MessageInterpreter, command routing then freeform fallback
- router.py: Command grammar and dispatch
- heuristics.py: Freeform multi-strategy resolution
- responder.py: Lookup-and-format operations shared by both paths
- transport.py: Transport contract
- types.py: Message and reply types
- constants.py: Command names and message texts
"""

from simplebot.services.bot.handler import MessageHandler, mention_tag, strip_mention
from simplebot.services.bot.heuristics import HeuristicResolver
from simplebot.services.bot.interpreter import MessageInterpreter
from simplebot.services.bot.responder import Responder
from simplebot.services.bot.router import COMMANDS, Command, CommandRouter, tokenize
from simplebot.services.bot.transport import Transport, send_reply
from simplebot.services.bot.types import FilePart, IncomingMessage, Reply, TextPart

__all__ = [
    # Entry points
    "MessageHandler",
    "MessageInterpreter",
    # Routing
    "Command",
    "CommandRouter",
    "COMMANDS",
    "HeuristicResolver",
    "Responder",
    "tokenize",
    # Transport
    "Transport",
    "send_reply",
    # Types
    "IncomingMessage",
    "Reply",
    "TextPart",
    "FilePart",
    # Helpers
    "mention_tag",
    "strip_mention",
]
