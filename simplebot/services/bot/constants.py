"""
Bot message texts and command names.

Reply texts use Slack-style markup (`code`, _italic_, *bold*) which the
transport passes through verbatim.
"""

# Command names
CMD_HELP = "help"
CMD_REFRESH = "refresh"
CMD_STATUS = "status"
CMD_TRANSLATE = "translate"
CMD_ID = "id"
CMD_SYSCODES = "syscodes"
CMD_SYSCODE = "syscode"
CMD_CLASSPART = "classpart"
CMD_TABLES = "tables"
CMD_TABLE = "table"
CMD_KEY = "key"
CMD_DEC = "dec"
CMD_HEX = "hex"
CMD_BIN = "bin"

# Appended when a result list is cut off
ELLIPSIS = "..."

# Attachment names
TABLE_FILENAME = "TABLE_{name}.txt"
STACKTRACE_FILENAME = "Stacktrace.txt"

HELP_TEMPLATE = """\
You can ask me questions by giving me a command with an appropriate argument.
Try it out by asking one of the following lines (just copy and paste into a new message):
{bot} help
{bot} id 108300000012be3c
{bot} classpart 1083
{bot} tables zuord
{bot} table portfolio
{bot} syscode 10510000940000aa
{bot} syscode C_InstParam_PseudoVerfall
{bot} key 1890
{bot} hex c0defeed
{bot} dec 1234567890
{bot} translate interest

If you talk with me without specifying a command, I will try to answer as best as I can (maybe giving multiple answers).
Please try one of the following:
{bot} 108300000012be3c
{bot} 1083
{bot} portfolio
{bot} interest

If you talk with me in a direct chat you do not need to prefix the messages with my name {bot}.
Please try one of the following:
108300000012be3c
1083
portfolio
interest"""

FAILURE_TEMPLATE = """\
*Failed to handle message:*
from: {sender}
channel: {channel}
content: {content}"""
