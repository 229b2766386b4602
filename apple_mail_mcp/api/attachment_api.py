"""
Attachment operations API.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from ..client.scripts import message_ref, quote
from ..errors import InvalidParameter

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.api.attachment")


async def list_attachments(runner: ScriptRunner, message_id: str, mailbox: str, account_name: str) -> list[dict[str, Any]]:
  msg = message_ref(message_id, mailbox, account_name)
  names = await runner.run_list(runner.tell(f"get name of every mail attachment of {msg}"))
  return [{"name": name} for name in names]


async def save_attachment(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
  attachment_name: str,
  save_path: str,
) -> str:
  """Save the attachment called `attachment_name` to an absolute POSIX path."""
  path = os.path.expanduser(save_path.strip())
  if not os.path.isabs(path):
    raise InvalidParameter(f"save_path must be an absolute path, got: {save_path!r}")

  log.info("Saving attachment %s to %s", attachment_name, path)
  body = f"""
set msg to {message_ref(message_id, mailbox, account_name)}
repeat with att in mail attachments of msg
  if name of att is {quote(attachment_name)} then
    save att in POSIX file {quote(path)}
    return {quote(f'Attachment saved to {path}')}
  end if
end repeat
return "Attachment not found"
"""
  return await runner.run(runner.tell(body))
