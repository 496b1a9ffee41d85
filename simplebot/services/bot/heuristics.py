"""
Freeform interpretation.

Used when no command matched. Every strategy is tried in a fixed order and
every one that finds something contributes to the reply; none of them
reports a miss. If nothing matches, the reply stays empty and nothing is sent.
"""

import logging

from simplebot.services.bot.responder import Responder
from simplebot.services.bot.router import tokenize
from simplebot.services.codec import CLASS_PART_LENGTH, parse_identifier
from simplebot.services.codec.constants import BINARY_PREFIX, HEX_PREFIX

logger = logging.getLogger(__name__)


class HeuristicResolver:
    """Runs all freeform strategies against the raw message text."""

    def resolve(self, text: str, responder: Responder) -> None:
        self.identifier(text, responder)
        self.class_part(text, responder)
        self.numbers(tokenize(text)[0], responder)
        responder.sys_code_details(text, fail_message=False)
        responder.table(text, fail_message=False)
        responder.translations(text, fail_message=False)

        logger.debug(f"Freeform interpretation produced {len(responder.reply)} reply parts")

    def identifier(self, text: str, responder: Responder) -> bool:
        """Full identifier: report it, its classpart table and its syscode."""
        parsed = parse_identifier(text)
        if parsed is None:
            return False

        # Classpart comes from the first four digits of the matched identifier
        responder.identifier(parsed, fail_message=False)
        responder.sys_code_by_id(parsed.value, fail_message=False)
        return True

    def class_part(self, text: str, responder: Responder) -> bool:
        parsed = parse_identifier(text, CLASS_PART_LENGTH)
        if parsed is None:
            return False
        return responder.class_part(parsed.hex_text, fail_message=False)

    def numbers(self, token: str, responder: Responder) -> bool:
        """
        Convert the first token.

        An explicit 0x/0b prefix selects the base; otherwise decimal, hex and
        binary are each attempted and every success is reported.
        """
        if token.startswith(HEX_PREFIX):
            return responder.number(token, 16, fail_message=False)
        if token.startswith(BINARY_PREFIX):
            return responder.number(token, 2, fail_message=False)

        found = False
        for base in (10, 16, 2):
            found |= responder.number(token, base, fail_message=False, intro_message=True)
        return found
