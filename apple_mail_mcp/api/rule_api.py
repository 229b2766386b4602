"""
Mail rule operations API.

Condition headers and qualifiers are mapped onto Mail's enumerations here;
only mapped values reach the script, user text only appears as quoted
expressions and names.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..client.parsers import parse_bool, parse_int
from ..client.scripts import mailbox_ref, quote, require_text
from ..errors import InvalidParameter

if TYPE_CHECKING:
  from ..client.script_runner import ScriptRunner

log = logging.getLogger("apple_mail.api.rule")

RULE_HEADERS = {
  "from": "from header",
  "to": "to header",
  "cc": "cc header",
  "to_or_cc": "to or cc header",
  "subject": "subject header",
  "any_recipient": "any recipient",
  "content": "message content",
  "message_content": "message content",
}

RULE_QUALIFIERS = {
  "contains": "does contain value",
  "does_contain_value": "does contain value",
  "does_not_contain": "does not contain value",
  "does_not_contain_value": "does not contain value",
  "begins_with": "begins with value",
  "begins_with_value": "begins with value",
  "ends_with": "ends with value",
  "ends_with_value": "ends with value",
  "equals": "equal to value",
  "equal_to_value": "equal to value",
}

RULE_ACTIONS = ("move_message", "account_name", "mark_read", "mark_flagged", "delete_message")


def _normalize(value: str) -> str:
  return value.strip().lower().replace(" ", "_").replace("-", "_")


def rule_condition_line(condition: dict[str, Any]) -> str:
  header = condition.get("header")
  expression = condition.get("expression")
  qualifier = condition.get("qualifier") or "contains"
  if not isinstance(header, str) or _normalize(header) not in RULE_HEADERS:
    raise InvalidParameter(f"condition header must be one of: {', '.join(RULE_HEADERS)}")
  if not isinstance(qualifier, str) or _normalize(qualifier) not in RULE_QUALIFIERS:
    raise InvalidParameter(f"condition qualifier must be one of: {', '.join(RULE_QUALIFIERS)}")
  if not isinstance(expression, str):
    raise InvalidParameter("condition expression is required")

  props = (
    f"rule type:{RULE_HEADERS[_normalize(header)]}, "
    f"qualifier:{RULE_QUALIFIERS[_normalize(qualifier)]}, "
    f"expression:{quote(expression)}"
  )
  return f"make new rule condition at end of rule conditions of newRule with properties {{{props}}}"


def _action_flag(actions: dict[str, Any], key: str) -> bool:
  value = actions.get(key)
  if value is None:
    return False
  if isinstance(value, bool):
    return value
  if value in ("true", "false"):
    return value == "true"
  raise InvalidParameter(f"action {key} must be a boolean")


def rule_action_lines(actions: dict[str, Any]) -> list[str]:
  unknown = sorted(set(actions) - set(RULE_ACTIONS))
  if unknown:
    raise InvalidParameter(f"unknown rule actions: {', '.join(unknown)}")

  lines = []
  move_to = actions.get("move_message")
  if move_to is not None:
    if not isinstance(move_to, str) or not move_to.strip():
      raise InvalidParameter("action move_message must be a mailbox name")
    account_name = actions.get("account_name")
    if account_name is not None and not isinstance(account_name, str):
      raise InvalidParameter("action account_name must be a string")
    target = mailbox_ref(move_to, account_name) if account_name else f"mailbox {quote(move_to)}"
    lines.append("set should move message of newRule to true")
    lines.append(f"set move message of newRule to {target}")
  for key, prop in (("mark_read", "mark read"), ("mark_flagged", "mark flagged"), ("delete_message", "delete message")):
    if _action_flag(actions, key):
      lines.append(f"set {prop} of newRule to true")
  return lines


async def list_rules(runner: ScriptRunner) -> list[dict[str, Any]]:
  names = await runner.run_list(runner.tell("get name of every rule"))
  return [{"name": name} for name in names]


async def enable_rule(runner: ScriptRunner, name: str, enabled: bool) -> str:
  require_text(name, "name")
  state = "enabled" if enabled else "disabled"
  done = f"Rule '{name}' {state}"
  body = f"""
set enabled of rule {quote(name)} to {str(enabled).lower()}
return {quote(done)}
"""
  return await runner.run(runner.tell(body))


async def get_rule_details(runner: ScriptRunner, name: str) -> dict[str, Any]:
  require_text(name, "name")
  rule = f"rule {quote(name)}"
  enabled = await runner.run(runner.tell(f"get enabled of {rule}"))
  mark_read = await runner.run(runner.tell(f"get mark read of {rule}"))
  mark_flagged = await runner.run(runner.tell(f"get mark flagged of {rule}"))
  delete_message = await runner.run(runner.tell(f"get delete message of {rule}"))
  stop_evaluating = await runner.run(runner.tell(f"get stop evaluating rules of {rule}"))
  move_message = await runner.run(runner.tell(f"""
if should move message of {rule} is false then return ""
return name of (move message of {rule})
"""))
  condition_count = await runner.run(runner.tell(f"count rule conditions of {rule}"))
  return {
    "name": name,
    "enabled": parse_bool(enabled),
    "mark_read": parse_bool(mark_read),
    "mark_flagged": parse_bool(mark_flagged),
    "delete_message": parse_bool(delete_message),
    "stop_evaluating_rules": parse_bool(stop_evaluating),
    "move_message": move_message,
    "condition_count": parse_int(condition_count, 0),
  }


async def create_rule(
  runner: ScriptRunner,
  name: str,
  conditions: list[dict[str, Any]] | None = None,
  actions: dict[str, Any] | None = None,
) -> str:
  require_text(name, "name")
  lines = [f"set newRule to make new rule at end of rules with properties {{name:{quote(name)}, enabled:true}}"]
  lines += [rule_condition_line(c) for c in conditions or []]
  lines += rule_action_lines(actions or {})
  done = f"Rule '{name}' created"
  lines.append(f"return {quote(done)}")
  log.info("Creating rule %s with %d condition(s)", name, len(conditions or []))
  return await runner.run(runner.tell("\n".join(lines)))


async def delete_rule(runner: ScriptRunner, name: str) -> str:
  require_text(name, "name")
  log.info("Deleting rule %s", name)
  done = f"Rule '{name}' deleted"
  body = f"""
delete rule {quote(name)}
return {quote(done)}
"""
  return await runner.run(runner.tell(body))
