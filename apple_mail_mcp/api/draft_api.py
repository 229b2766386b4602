"""
Draft operations API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..client.scripts import mailbox_ref
from .send_api import new_message_script

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner


async def list_drafts(runner: ScriptRunner, account_name: str) -> list[dict[str, Any]]:
  subjects = await runner.run_list(runner.tell(f"get subject of messages of {mailbox_ref('Drafts', account_name)}"))
  return [{"subject": subject} for subject in subjects]


async def create_draft(runner: ScriptRunner, to: list[str], subject: str, body: str) -> str:
  lines = new_message_script(to, subject, body)
  lines += ["save newMessage", 'return "Draft created successfully"']
  return await runner.run(runner.tell("\n".join(lines)))
