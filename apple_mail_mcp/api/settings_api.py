"""
Signatures, SMTP servers, address helpers and application info API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..client.parsers import parse_bool, parse_int
from ..client.scripts import quote, require_text

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner


async def list_signatures(runner: ScriptRunner) -> list[dict[str, Any]]:
  names = await runner.run_list(runner.tell("get name of every signature"))
  return [{"name": name} for name in names]


async def get_signature(runner: ScriptRunner, name: str) -> dict[str, Any]:
  require_text(name, "name")
  content = await runner.run(runner.tell(f"get content of signature {quote(name)}"))
  return {"name": name, "content": content}


async def list_smtp_servers(runner: ScriptRunner) -> list[dict[str, Any]]:
  names = await runner.run_list(runner.tell("get name of every smtp server"))
  return [{"name": name} for name in names]


async def extract_name_from_address(runner: ScriptRunner, address: str) -> str:
  return await runner.run(runner.tell(f"extract name from {quote(address)}"))


async def extract_address(runner: ScriptRunner, address: str) -> str:
  return await runner.run(runner.tell(f"extract address from {quote(address)}"))


async def get_mail_app_info(runner: ScriptRunner) -> dict[str, Any]:
  version = await runner.run(runner.tell("get version"))
  fetch_interval = await runner.run(runner.tell("get fetch interval"))
  fetches_automatically = await runner.run(runner.tell("get fetches automatically"))
  background_activity = await runner.run(runner.tell("get background activity count"))
  return {
    "version": version,
    # -1 when Mail reports no usable interval
    "fetch_interval": parse_int(fetch_interval, -1),
    "fetches_automatically": parse_bool(fetches_automatically),
    "background_activity_count": parse_int(background_activity, 0),
  }
