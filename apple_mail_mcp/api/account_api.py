"""
Account operations API (list, inspect, check for mail, synchronize).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..client.parsers import parse_bool
from ..client.scripts import account_ref, quote

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.api.account")


async def list_accounts(runner: ScriptRunner) -> list[dict[str, Any]]:
  """List configured accounts by name. One query, one entry per name."""
  names = await runner.run_list(runner.tell("get name of every account"))
  return [{"name": name} for name in names]


async def get_account_info(runner: ScriptRunner, account_name: str) -> dict[str, Any]:
  acc = account_ref(account_name)
  enabled = await runner.run(runner.tell(f"get enabled of {acc}"))
  addresses = await runner.run_list(runner.tell(f"get email addresses of {acc}"))
  return {
    "name": account_name,
    "enabled": parse_bool(enabled),
    "email_addresses": addresses,
  }


async def check_for_new_mail(runner: ScriptRunner, account_name: str | None = None) -> str:
  if account_name:
    body = f"""
check for new mail for {account_ref(account_name)}
return {quote(f'Checking for new mail in {account_name}')}
"""
  else:
    body = """
check for new mail
return "Checking for new mail in all accounts"
"""
  return await runner.run(runner.tell(body))


async def synchronize_account(runner: ScriptRunner, account_name: str) -> str:
  log.info("Synchronizing account %s", account_name)
  body = f"""
synchronize with {account_ref(account_name)}
return {quote(f'Synchronizing account {account_name}')}
"""
  return await runner.run(runner.tell(body))
