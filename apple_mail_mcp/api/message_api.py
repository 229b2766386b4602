"""
Email message read/search operations API.

`list_emails` issues one query per field and zips the results positionally;
when Mail returns fields of different lengths the combined list is cut to
the shortest one. `search_emails` builds its records inside one script so
every row comes from the same message.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..client.parsers import parse_bool, parse_int
from ..client.scripts import mailbox_ref, message_ref, quote
from ..errors import InvalidParameter

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.api.message")

DEFAULT_LIST_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 20
SEARCH_FIELDS = ("id", "subject", "sender")


def positive_limit(limit: int | None, default: int) -> int:
  if limit is None:
    return default
  if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
    raise InvalidParameter(f"limit must be a positive integer, got: {limit!r}")
  return limit


def zip_fields(columns: dict[str, list[str]]) -> list[dict[str, str]]:
  """Combine parallel field lists into records, stopping at the shortest list."""
  if not columns:
    return []
  length = min(len(values) for values in columns.values())
  if any(len(values) != length for values in columns.values()):
    log.warning(
      "Field lists differ in length (%s), truncating to %d",
      ", ".join(f"{k}={len(v)}" for k, v in columns.items()),
      length,
    )
  return [{key: values[i] for key, values in columns.items()} for i in range(length)]


async def list_emails(
  runner: ScriptRunner,
  mailbox: str,
  account_name: str,
  limit: int | None = None,
) -> list[dict[str, str]]:
  """List the first `limit` messages of a mailbox (id, subject, sender)."""
  limit = positive_limit(limit, DEFAULT_LIST_LIMIT)
  mb = mailbox_ref(mailbox, account_name)

  def field_script(prop: str) -> str:
    return runner.tell(f"""
set mb to {mb}
set n to count of messages of mb
if n > {limit} then set n to {limit}
if n is 0 then return {{}}
get {prop} of messages 1 thru n of mb
""")

  ids = await runner.run_list(field_script("id"))
  subjects = await runner.run_list(field_script("subject"))
  senders = await runner.run_list(field_script("sender"))
  return zip_fields({"id": ids, "subject": subjects, "sender": senders})


async def get_email(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
) -> dict[str, Any]:
  """Fetch one message field by field. Any failing query fails the whole read."""
  msg = message_ref(message_id, mailbox, account_name)
  subject = await runner.run(runner.tell(f"get subject of {msg}"))
  sender = await runner.run(runner.tell(f"get sender of {msg}"))
  content = await runner.run(runner.tell(f"get content of {msg}"))
  date_received = await runner.run(runner.tell(f"get date received of {msg}"))
  read = await runner.run(runner.tell(f"get read status of {msg}"))
  return {
    "id": message_id.strip(),
    "subject": subject,
    "sender": sender,
    "content": content,
    "date_received": date_received,
    "read": parse_bool(read),
  }


async def search_emails(
  runner: ScriptRunner,
  query: str,
  mailbox: str,
  account_name: str,
  limit: int | None = None,
) -> list[dict[str, str]]:
  """Find messages whose subject contains `query` (id, subject, sender)."""
  limit = positive_limit(limit, DEFAULT_SEARCH_LIMIT)
  mb = mailbox_ref(mailbox, account_name)

  script = runner.tell(f"""
set foundMsgs to (messages of {mb} whose subject contains {quote(query)})
set results to {{}}
repeat with msg in foundMsgs
  if (count of results) >= {limit} then exit repeat
  set end of results to {{|id|:id of msg, |subject|:subject of msg, |sender|:sender of msg}}
end repeat
return results
""")
  records = await runner.run_records(script)
  return [{key: record.get(key, "") for key in SEARCH_FIELDS} for record in records]


async def get_email_headers(runner: ScriptRunner, message_id: str, mailbox: str, account_name: str) -> str:
  msg = message_ref(message_id, mailbox, account_name)
  return await runner.run(runner.tell(f"get all headers of {msg}"))


async def get_email_source(runner: ScriptRunner, message_id: str, mailbox: str, account_name: str) -> str:
  msg = message_ref(message_id, mailbox, account_name)
  return await runner.run(runner.tell(f"get source of {msg}"))


async def get_email_metadata(
  runner: ScriptRunner,
  message_id: str,
  mailbox: str,
  account_name: str,
) -> dict[str, Any]:
  msg = message_ref(message_id, mailbox, account_name)
  forwarded = await runner.run(runner.tell(f"get was forwarded of {msg}"))
  replied = await runner.run(runner.tell(f"get was replied to of {msg}"))
  redirected = await runner.run(runner.tell(f"get was redirected of {msg}"))
  size = await runner.run(runner.tell(f"get message size of {msg}"))
  return {
    "id": message_id.strip(),
    "was_forwarded": parse_bool(forwarded),
    "was_replied_to": parse_bool(replied),
    "was_redirected": parse_bool(redirected),
    "size": parse_int(size, 0),
  }


async def list_vip_senders(runner: ScriptRunner) -> list[str]:
  """Senders of the messages in Mail's VIP smart mailbox."""
  return await runner.run_list(runner.tell('get sender of messages of mailbox "VIP"'))
