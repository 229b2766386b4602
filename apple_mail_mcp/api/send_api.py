"""
Compose, reply, forward and redirect operations API.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..client.scripts import message_ref, quote, recipient_lines
from ..errors import InvalidParameter

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.api.send")


def _indent(lines: list[str]) -> str:
  return "\n".join(f"  {line}" for line in lines)


def _require_recipients(to: list[str]) -> None:
  if not any(addr.strip() for addr in to):
    raise InvalidParameter("to must list at least one recipient")


def new_message_script(
  to: list[str],
  subject: str,
  body: str,
  cc: list[str] | None = None,
  bcc: list[str] | None = None,
) -> list[str]:
  """Script lines creating `newMessage` with its recipients."""
  recipients = recipient_lines(to, "to")
  recipients += recipient_lines(cc or [], "cc")
  recipients += recipient_lines(bcc or [], "bcc")
  return [
    f"set newMessage to make new outgoing message with properties {{subject:{quote(subject)}, content:{quote(body)}, visible:true}}",
    "tell newMessage",
    _indent(recipients),
    "end tell",
  ]


async def compose_email(
  runner: ScriptRunner,
  to: list[str],
  subject: str,
  body: str,
  cc: list[str] | None = None,
  bcc: list[str] | None = None,
) -> str:
  _require_recipients(to)
  log.info("Sending email to %d recipient(s)", len(to) + len(cc or []) + len(bcc or []))
  lines = new_message_script(to, subject, body, cc, bcc)
  lines += ["send newMessage", 'return "Email sent successfully"']
  return await runner.run(runner.tell("\n".join(lines)))


async def reply_email(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
  body: str,
  reply_all: bool = False,
) -> str:
  reply_cmd = "reply originalMsg with opening window"
  if reply_all:
    reply_cmd += " and reply to all"
  script = f"""
set originalMsg to {message_ref(message_id, mailbox, account_name)}
set replyMsg to {reply_cmd}
tell replyMsg
  set content to {quote(body)} & return & return & content
end tell
send replyMsg
return "Reply sent successfully"
"""
  return await runner.run(runner.tell(script))


async def forward_email(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
  to: list[str],
  body: str | None = None,
) -> str:
  _require_recipients(to)
  inner = recipient_lines(to, "to")
  if body:
    inner.append(f"set content to {quote(body)} & return & return & content")
  lines = [
    f"set originalMsg to {message_ref(message_id, mailbox, account_name)}",
    "set fwdMsg to forward originalMsg with opening window",
    "tell fwdMsg",
    _indent(inner),
    "end tell",
    "send fwdMsg",
    'return "Email forwarded successfully"',
  ]
  return await runner.run(runner.tell("\n".join(lines)))


async def redirect_email(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
  to: list[str],
) -> str:
  """Redirect keeps the original sender, unlike forward."""
  _require_recipients(to)
  lines = [
    f"set originalMsg to {message_ref(message_id, mailbox, account_name)}",
    "set redirectMsg to redirect originalMsg with opening window",
    "tell redirectMsg",
    _indent(recipient_lines(to, "to")),
    "end tell",
    "send redirectMsg",
    'return "Email redirected successfully"',
  ]
  return await runner.run(runner.tell("\n".join(lines)))


async def open_mailto(runner: ScriptRunner, url: str) -> str:
  url = url.strip()
  if not url.lower().startswith("mailto:"):
    raise InvalidParameter("url must start with mailto:")
  body = f"""
mailto {quote(url)}
return "Opened mailto URL"
"""
  return await runner.run(runner.tell(body))
