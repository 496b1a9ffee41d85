"""
Message interpretation entry point.

Routes one line of text through the command grammar and, when no command
matches, through the freeform heuristics. Each call works on the reference
snapshot that is current when it starts.
"""

from simplebot.config import settings
from simplebot.services.bot.heuristics import HeuristicResolver
from simplebot.services.bot.responder import Responder
from simplebot.services.bot.router import CommandRouter
from simplebot.services.bot.types import Reply
from simplebot.services.lookup import ReferenceData


class MessageInterpreter:
    """Turns message text into a Reply."""

    def __init__(
        self,
        reference: ReferenceData,
        bot_name: str | None = None,
        max_listed_results: int | None = None,
    ) -> None:
        self.reference = reference
        self.bot_name = bot_name or settings.bot_name
        self.max_listed_results = max_listed_results or settings.max_listed_results
        self.router = CommandRouter(reference, self.bot_name)
        self.heuristics = HeuristicResolver()

    async def interpret(self, text: str) -> Reply:
        reply = Reply()
        responder = Responder(self.reference.snapshot, reply, self.max_listed_results)

        if not await self.router.route(text, responder):
            self.heuristics.resolve(text, responder)

        return reply
