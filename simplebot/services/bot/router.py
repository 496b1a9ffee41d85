"""
Command routing.

A message is a command when its first whitespace-separated token equals a
command name exactly and enough arguments follow. Anything else falls
through to the heuristic resolver.
"""

import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from simplebot.services.bot import constants as c
from simplebot.services.bot.responder import Responder
from simplebot.services.codec import CLASS_PART_LENGTH, parse_identifier
from simplebot.services.lookup import ReferenceData

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Split on whitespace runs; no quoting. An empty text yields [""]."""
    return _WHITESPACE.split(text)


@dataclass(frozen=True)
class Command:
    """Command name with its tokenized arguments."""

    name: str
    args: list[str]

    @classmethod
    def parse(cls, text: str) -> "Command":
        tokens = tokenize(text)
        return cls(name=tokens[0], args=tokens[1:])

    def matches(self, name: str, arity: int) -> bool:
        return self.name == name and len(self.args) >= arity


# Handler signature: (router, responder, command) -> None
CommandHandler = Callable[["CommandRouter", Responder, Command], Awaitable[None]]


@dataclass(frozen=True)
class CommandSpec:
    """Grammar entry: command name, minimum argument count and handler."""

    name: str
    arity: int
    handler: CommandHandler


class CommandRouter:
    """Matches a message against the command grammar and runs the handler."""

    def __init__(self, reference: ReferenceData, bot_name: str) -> None:
        self.reference = reference
        self.bot_name = bot_name

    async def route(self, text: str, responder: Responder) -> bool:
        """
        Run the matching command, if any.

        Returns:
            True if a command matched (its reply is in the responder), False to fall through
        """
        command = Command.parse(text)
        for spec in COMMANDS:
            if command.matches(spec.name, spec.arity):
                logger.debug(f"Routing to command {spec.name!r}")
                await spec.handler(self, responder, command)
                return True
        return False

    # ─────────────────────────────────────────────────────────────────────
    # Handlers
    # ─────────────────────────────────────────────────────────────────────

    async def _help(self, responder: Responder, command: Command) -> None:
        responder.help(self.bot_name)

    async def _refresh(self, responder: Responder, command: Command) -> None:
        # Answer the status from the freshly published snapshot
        responder.snapshot = await self.reference.refresh()
        responder.status()

    async def _status(self, responder: Responder, command: Command) -> None:
        responder.status()

    async def _translate(self, responder: Responder, command: Command) -> None:
        responder.translations(command.args[0])

    async def _id(self, responder: Responder, command: Command) -> None:
        text = command.args[0]
        parsed = parse_identifier(text)
        if parsed is None:
            responder.reply.text(
                f"This is a not a valid Xentis id: {text}. It must be 16 hex digits."
            )
            return
        responder.identifier(parsed)

    async def _sys_codes(self, responder: Responder, command: Command) -> None:
        responder.sys_code_list(command.args[0])

    async def _sys_code(self, responder: Responder, command: Command) -> None:
        text = command.args[0]
        parsed = parse_identifier(text)
        if parsed is not None:
            responder.sys_code_by_id(parsed.value)
        else:
            responder.sys_code_details(text)

    async def _class_part(self, responder: Responder, command: Command) -> None:
        text = command.args[0]
        parsed = parse_identifier(text, CLASS_PART_LENGTH)
        if parsed is None:
            responder.reply.text(
                f"This is a not a valid Xentis classpart: {text}. It must be 4 hex digits."
            )
            return
        responder.class_part(parsed.hex_text)

    async def _tables(self, responder: Responder, command: Command) -> None:
        responder.table_list(command.args[0])

    async def _table(self, responder: Responder, command: Command) -> None:
        responder.table(command.args[0])

    async def _key(self, responder: Responder, command: Command) -> None:
        responder.key_node(command.args[0])

    async def _dec(self, responder: Responder, command: Command) -> None:
        responder.number(command.args[0], 10)

    async def _hex(self, responder: Responder, command: Command) -> None:
        responder.number(command.args[0], 16)

    async def _bin(self, responder: Responder, command: Command) -> None:
        responder.number(command.args[0], 2)


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec("", 0, CommandRouter._help),
    CommandSpec(c.CMD_HELP, 0, CommandRouter._help),
    CommandSpec(c.CMD_REFRESH, 0, CommandRouter._refresh),
    CommandSpec(c.CMD_STATUS, 0, CommandRouter._status),
    CommandSpec(c.CMD_TRANSLATE, 1, CommandRouter._translate),
    CommandSpec(c.CMD_ID, 1, CommandRouter._id),
    CommandSpec(c.CMD_SYSCODES, 1, CommandRouter._sys_codes),
    CommandSpec(c.CMD_SYSCODE, 1, CommandRouter._sys_code),
    CommandSpec(c.CMD_CLASSPART, 1, CommandRouter._class_part),
    CommandSpec(c.CMD_TABLES, 1, CommandRouter._tables),
    CommandSpec(c.CMD_TABLE, 1, CommandRouter._table),
    CommandSpec(c.CMD_KEY, 1, CommandRouter._key),
    CommandSpec(c.CMD_DEC, 1, CommandRouter._dec),
    CommandSpec(c.CMD_HEX, 1, CommandRouter._hex),
    CommandSpec(c.CMD_BIN, 1, CommandRouter._bin),
)
