"""
Mailbox operations API (list, create, delete, unread counts, special mailboxes, import).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..client.parsers import parse_int
from ..client.scripts import account_ref, mailbox_ref, quote, require_text

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.api.mailbox")

# Result key -> Mail application property naming that mailbox.
SPECIAL_MAILBOXES = {
  "inbox": "inbox",
  "drafts": "drafts mailbox",
  "sent": "sent mailbox",
  "trash": "trash mailbox",
  "junk": "junk mailbox",
  "outbox": "outbox",
}


async def list_mailboxes(runner: ScriptRunner, account_name: str | None = None) -> list[dict[str, Any]]:
  """List mailbox names, for one account or for all accounts."""
  if account_name:
    names = await runner.run_list(runner.tell(f"get name of every mailbox of {account_ref(account_name)}"))
    return [{"name": name, "account": account_name} for name in names]

  body = """
set allNames to {}
repeat with acc in accounts
  set allNames to allNames & (name of every mailbox of acc)
end repeat
return allNames
"""
  names = await runner.run_list(runner.tell(body))
  return [{"name": name} for name in names]


async def create_mailbox(runner: ScriptRunner, name: str, account_name: str) -> str:
  require_text(name, "name")
  log.info("Creating mailbox %s in %s", name, account_name)
  body = f"""
make new mailbox with properties {{name:{quote(name)}}} at {account_ref(account_name)}
return {quote(f'Created mailbox: {name}')}
"""
  return await runner.run(runner.tell(body))


async def delete_mailbox(runner: ScriptRunner, name: str, account_name: str) -> str:
  require_text(name, "name")
  log.info("Deleting mailbox %s in %s", name, account_name)
  body = f"""
delete {mailbox_ref(name, account_name)}
return {quote(f'Deleted mailbox: {name}')}
"""
  return await runner.run(runner.tell(body))


async def get_unread_count(
  runner: ScriptRunner,
  mailbox: str | None = None,
  account_name: str | None = None,
) -> int:
  """Unread count for a mailbox, an account, a mailbox name across accounts, or everything."""
  if mailbox and account_name:
    body = f"get unread count of {mailbox_ref(mailbox, account_name)}"
  elif account_name:
    body = f"""
set total to 0
repeat with mb in mailboxes of {account_ref(account_name)}
  set total to total + (unread count of mb)
end repeat
return total
"""
  elif mailbox:
    body = f"""
set total to 0
repeat with acc in accounts
  repeat with mb in (mailboxes of acc whose name is {quote(mailbox)})
    set total to total + (unread count of mb)
  end repeat
end repeat
return total
"""
  else:
    body = """
set total to 0
repeat with acc in accounts
  repeat with mb in mailboxes of acc
    set total to total + (unread count of mb)
  end repeat
end repeat
return total
"""
  return parse_int(await runner.run(runner.tell(body)), 0)


async def get_special_mailboxes(runner: ScriptRunner) -> dict[str, str]:
  """Names of Mail's special mailboxes, one query per mailbox."""
  result: dict[str, str] = {}
  for key, prop in SPECIAL_MAILBOXES.items():
    result[key] = await runner.run(runner.tell(f"get name of {prop}"))
  return result


async def import_mailbox(runner: ScriptRunner, path: str) -> str:
  require_text(path, "path")
  log.info("Importing mailbox from %s", path)
  body = f"""
import Mail mailbox at (POSIX file {quote(path)})
return {quote(f'Imported mailbox from {path}')}
"""
  return await runner.run(runner.tell(body))
