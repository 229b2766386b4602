"""
Email action operations API (read/flag status, move, copy, delete, colors, junk).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..client.scripts import mailbox_ref, message_ref, quote
from ..errors import InvalidParameter

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.api.flag")

# Flag index -> label. -1 clears the flag.
FLAG_COLORS = ("red", "orange", "yellow", "green", "blue", "purple", "gray")
BACKGROUND_COLORS = ("blue", "gray", "green", "none", "orange", "purple", "red", "yellow")


def _as_script_bool(value: bool) -> str:
  return "true" if value else "false"


def flag_color_label(color_index: int) -> str:
  if 0 <= color_index < len(FLAG_COLORS):
    return FLAG_COLORS[color_index]
  return "none"


async def mark_read(runner: ScriptRunner, message_id: str, mailbox: str, account_name: str, read: bool) -> str:
  msg = message_ref(message_id, mailbox, account_name)
  done = "Email marked as read" if read else "Email marked as unread"
  body = f"""
set read status of {msg} to {_as_script_bool(read)}
return {quote(done)}
"""
  return await runner.run(runner.tell(body))


async def flag_email(runner: ScriptRunner, message_id: str, mailbox: str, account_name: str, flagged: bool) -> str:
  msg = message_ref(message_id, mailbox, account_name)
  done = "Email flagged" if flagged else "Email unflagged"
  body = f"""
set flagged status of {msg} to {_as_script_bool(flagged)}
return {quote(done)}
"""
  return await runner.run(runner.tell(body))


async def move_email(
  runner: ScriptRunner,
  message_id: str,
  from_mailbox: str,
  to_mailbox: str,
  account_name: str,
) -> str:
  log.info("Moving message %s from %s to %s", message_id, from_mailbox, to_mailbox)
  body = f"""
set msg to {message_ref(message_id, from_mailbox, account_name)}
move msg to {mailbox_ref(to_mailbox, account_name)}
return {quote(f'Email moved to {to_mailbox}')}
"""
  return await runner.run(runner.tell(body))


async def copy_email(
  runner: ScriptRunner,
  message_id: str,
  from_mailbox: str,
  to_mailbox: str,
  account_name: str,
) -> str:
  body = f"""
set msg to {message_ref(message_id, from_mailbox, account_name)}
duplicate msg to {mailbox_ref(to_mailbox, account_name)}
return {quote(f'Email copied to {to_mailbox}')}
"""
  return await runner.run(runner.tell(body))


async def delete_email(runner: ScriptRunner, message_id: str, mailbox: str, account_name: str) -> str:
  log.info("Deleting message %s from %s", message_id, mailbox)
  body = f"""
delete {message_ref(message_id, mailbox, account_name)}
return "Email deleted"
"""
  return await runner.run(runner.tell(body))


async def set_flag_color(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
  color_index: int,
) -> str:
  """Set the flag index as given; indexes outside 0-6 read back as "none"."""
  msg = message_ref(message_id, mailbox, account_name)
  body = f"""
set flag index of {msg} to {int(color_index)}
return {quote(f'Flag color set to {flag_color_label(color_index)}')}
"""
  return await runner.run(runner.tell(body))


async def set_background_color(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
  color: str,
) -> str:
  color = color.strip().lower()
  if color not in BACKGROUND_COLORS:
    raise InvalidParameter(f"color must be one of: {', '.join(BACKGROUND_COLORS)}")
  msg = message_ref(message_id, mailbox, account_name)
  body = f"""
set background color of {msg} to {color}
return {quote(f'Background color set to {color}')}
"""
  return await runner.run(runner.tell(body))


async def mark_as_junk(runner: ScriptRunner, message_id: str, mailbox: str, account_name: str, is_junk: bool) -> str:
  msg = message_ref(message_id, mailbox, account_name)
  done = "Email marked as junk" if is_junk else "Email marked as not junk"
  body = f"""
set junk mail status of {msg} to {_as_script_bool(is_junk)}
return {quote(done)}
"""
  return await runner.run(runner.tell(body))
