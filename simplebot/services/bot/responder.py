"""
Reply builders.

Each method performs one lookup against the reference snapshot and appends
its answer to the reply. `fail_message` controls whether a miss is reported:
explicit commands report every miss, freeform interpretation stays silent so
that only the strategies that found something show up.
"""

import logging

from simplebot.services.bot.constants import HELP_TEMPLATE, TABLE_FILENAME
from simplebot.services.bot.formatting import limited_lines, plural
from simplebot.services.bot.types import Reply
from simplebot.services.codec import (
    CLASS_PART_LENGTH,
    ParsedIdentifier,
    class_part_text,
    convert,
    derive_class_part,
)
from simplebot.services.codec.constants import DIGIT_PATTERNS, INT_MAX, INT_MIN
from simplebot.services.lookup import ReferenceSnapshot
from simplebot.services.translation import sorted_translations

logger = logging.getLogger(__name__)


def _parse_int(text: str) -> int | None:
    if not DIGIT_PATTERNS[10].fullmatch(text):
        return None
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


class Responder:
    """Builds the reply for one message against one reference snapshot."""

    def __init__(
        self,
        snapshot: ReferenceSnapshot,
        reply: Reply,
        max_listed_results: int = 10,
    ) -> None:
        self.snapshot = snapshot
        self.reply = reply
        self.max_listed_results = max_listed_results

    # ─────────────────────────────────────────────────────────────────────
    # General
    # ─────────────────────────────────────────────────────────────────────

    def help(self, bot_name: str) -> None:
        self.reply.text(HELP_TEMPLATE.format(bot=f"@{bot_name}"))

    def status(self) -> None:
        self.reply.text("\n".join(self.snapshot.status_lines()))

    # ─────────────────────────────────────────────────────────────────────
    # Identifiers and classparts
    # ─────────────────────────────────────────────────────────────────────

    def identifier(self, parsed: ParsedIdentifier, fail_message: bool = True) -> None:
        """Report an identifier and the table its classpart points to."""
        self.reply.text(f"This is a Xentis id: {parsed.hex_text} = decimal {parsed.value}")
        self.class_part(parsed.hex_text, fail_message=fail_message)

    def class_part(self, text: str, fail_message: bool = True) -> bool:
        """Look up the table for the classpart in the first four hex digits of `text`."""
        prefix = text[:CLASS_PART_LENGTH]
        table_name = self.snapshot.tables.get_table_name(derive_class_part(text))

        if table_name is None:
            if fail_message:
                self.reply.text(f"This is not a Xentis classpart: {prefix}.")
            return False

        self.reply.text(f"The classpart {prefix} indicates a Xentis table {table_name}")
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Syscodes
    # ─────────────────────────────────────────────────────────────────────

    def sys_code_by_id(self, id: int, fail_message: bool = True) -> bool:
        sys_code = self.snapshot.sys_codes.get_sys_code(id)

        if sys_code is None:
            if fail_message:
                self.reply.text(f"This is not a valid Xentis syscode: {id:x}")
            return False

        self.reply.text(self.snapshot.sys_codes.to_message(sys_code))
        return True

    def sys_code_list(self, text: str, fail_message: bool = True) -> bool:
        """Compact listing of every match: hex id and name per line."""
        results = self.snapshot.sys_codes.find_sys_codes(text)

        if not results:
            if fail_message:
                self.reply.text("No matching Xentis syscodes found.")
            return False

        lines = [f"Found {len(results)} {plural(len(results), 'syscode', 'syscodes')}:"]
        lines.extend(f"{sys_code.id:x} `{sys_code.name}`" for sys_code in results)
        self.reply.text("\n".join(lines))
        return True

    def sys_code_details(self, text: str, fail_message: bool = True) -> bool:
        """Detailed listing of the first matches, cut off after max_listed_results."""
        results = self.snapshot.sys_codes.find_sys_codes(text)

        if not results:
            if fail_message:
                self.reply.text("No matching Xentis syscodes found.")
            return False

        lines = [f"Found {len(results)} {plural(len(results), 'syscode', 'syscodes')}:"]
        lines.extend(
            limited_lines(results, self.max_listed_results, self.snapshot.sys_codes.to_message)
        )
        self.reply.text("\n".join(lines))
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Tables
    # ─────────────────────────────────────────────────────────────────────

    def table(self, text: str, fail_message: bool = True) -> bool:
        """Attach the table dump and report the table's classpart."""
        table_name = text.upper()
        tables = self.snapshot.tables
        found = False

        table = tables.get_table(table_name)
        if table is not None:
            filename = TABLE_FILENAME.format(name=table_name)
            self.reply.file(table.to_message().encode("utf-8"), filename)
            table_id: int | None = table.table_id
            found = True
        else:
            table_id = tables.get_table_id(table_name)

        if table_id is not None:
            self.reply.text(
                f"The classpart of the Xentis table {table_name} is {class_part_text(table_id)}"
            )
            found = True
        elif fail_message:
            self.reply.text(f"This is not a Xentis table: {table_name}.")

        return found

    def table_list(self, text: str, fail_message: bool = True) -> bool:
        table_names = sorted(self.snapshot.tables.get_table_names(text))

        if not table_names:
            if fail_message:
                self.reply.text("_No matching tables found._")
            return False

        count = len(table_names)
        lines = [f"_Found {count} matching {plural(count, 'table', 'tables')}._"]
        lines.extend(table_names)
        self.reply.text("\n".join(lines))
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Key nodes
    # ─────────────────────────────────────────────────────────────────────

    def key_node(self, text: str, fail_message: bool = True) -> bool:
        id = _parse_int(text)
        if id is None:
            if fail_message:
                self.reply.text(
                    f"Not a valid Xentis key id (must be an integer value): {text}"
                )
            return False

        key_node = self.snapshot.key_nodes.get_key_node(id)
        if key_node is None:
            if fail_message:
                self.reply.text(f"No Xentis key node found for id: {id}")
            return False

        self.reply.text(self.snapshot.key_nodes.to_message(key_node))
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Numbers
    # ─────────────────────────────────────────────────────────────────────

    def number(
        self,
        token: str,
        base: int,
        fail_message: bool = True,
        intro_message: bool = True,
    ) -> bool:
        conversion = convert(token, base)

        if conversion is None:
            if fail_message:
                self.reply.text(f"Not a valid number for base {base}: {token}")
            return False

        if intro_message:
            self.reply.text(f"Interpreting as number with base {base}:")
        self.reply.text(conversion.to_message())
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Translations
    # ─────────────────────────────────────────────────────────────────────

    def translations(self, text: str, fail_message: bool = True) -> bool:
        """
        Search translations, showing exact matches if any, otherwise partial ones.

        With fail_message=False neither an empty query nor an empty result
        produces any output.
        """
        if text == "":
            if fail_message:
                self.reply.text("Nothing to translate.")
            return False

        result = self.snapshot.translations.search(text)
        matches = result.best()

        if not matches:
            if fail_message:
                self.reply.text("No translations found.")
            return False

        count = len(matches)
        noun = plural(count, "translation", "translations")
        if result.is_exact:
            header = f"Found {count} {noun} for exactly this term:"
        else:
            header = f"Found {count} {noun} that partially matched this term:"

        lines = [header]
        lines.extend(
            limited_lines(
                sorted_translations(matches),
                self.max_listed_results,
                lambda t: f"_{t.english}_ : _{t.german}_",
            )
        )
        self.reply.text("\n".join(lines))
        logger.debug(f"Translation search for {text!r}: {count} matches (exact={result.is_exact})")
        return True
