from __future__ import annotations

import json
import logging

from apple_mail_mcp.errors import ScriptCreationFailed, ScriptExecutionFailed
from apple_mail_mcp.handlers import DISPATCH, dispatch_tool
from apple_mail_mcp.server import SERVER_NAME, create_mcp_server
from apple_mail_mcp.tools import ALL_TOOLS, TOOLS_BY_NAME

from .conftest import FakeRunner

EXPECTED_TOOLS = {
  "list_accounts", "get_account_info", "list_mailboxes", "create_mailbox", "delete_mailbox",
  "list_emails", "get_email", "search_emails", "get_unread_count", "mark_read", "flag_email",
  "move_email", "delete_email", "compose_email", "reply_email", "forward_email", "list_drafts",
  "create_draft", "list_attachments", "save_attachment", "list_vip_senders", "list_rules",
  "enable_rule", "get_rule_details", "create_rule", "delete_rule", "check_for_new_mail",
  "synchronize_account", "copy_email", "set_flag_color", "set_background_color", "mark_as_junk",
  "get_email_headers", "get_email_source", "redirect_email", "get_email_metadata",
  "list_signatures", "get_signature", "list_smtp_servers", "get_special_mailboxes",
  "extract_name_from_address", "extract_address", "get_mail_app_info", "open_mailto",
  "import_mailbox",
}

MARK_READ_ARGS = {"id": "42", "mailbox": "INBOX", "account_name": "Work", "read": True}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def test_catalog_has_every_tool_once():
  names = [tool.name for tool in ALL_TOOLS]
  assert len(names) == 45
  assert len(set(names)) == 45
  assert set(names) == EXPECTED_TOOLS


def test_every_tool_has_a_handler():
  assert set(DISPATCH) == set(TOOLS_BY_NAME)


def test_catalog_is_stable():
  from apple_mail_mcp.tools import ALL_TOOLS as again

  assert [t.model_dump() for t in again] == [t.model_dump() for t in ALL_TOOLS]


def test_required_fields():
  def required(name):
    return TOOLS_BY_NAME[name].inputSchema.get("required", [])

  assert required("search_emails") == ["query", "mailbox", "account_name"]
  assert required("mark_read") == ["id", "mailbox", "account_name", "read"]
  assert required("compose_email") == ["to", "subject", "body"]
  assert required("list_accounts") == []
  assert required("get_unread_count") == []


def test_server_name():
  assert create_mcp_server(FakeRunner()).name == SERVER_NAME == "apple-mail-mcp"


# ---------------------------------------------------------------------------
# End-to-end through the dispatcher
# ---------------------------------------------------------------------------


async def test_list_accounts_returns_sorted_json():
  runner = FakeRunner(["Work", "Home"])
  result = await dispatch_tool("list_accounts", {}, runner)

  assert not result.is_error
  assert json.loads(result.content) == [{"name": "Work"}, {"name": "Home"}]
  assert result.content == json.dumps([{"name": "Work"}, {"name": "Home"}], indent=2, sort_keys=True)
  assert len(runner.scripts) == 1
  assert "get name of every account" in runner.scripts[0]


async def test_mark_read_success():
  runner = FakeRunner("Email marked as read")
  result = await dispatch_tool("mark_read", MARK_READ_ARGS, runner)

  assert not result.is_error
  assert result.content == "Email marked as read"
  assert len(runner.scripts) == 1
  assert 'set read status of message id 42 of mailbox "INBOX" of account "Work" to true' in runner.scripts[0]


async def test_mark_read_failure_reports_code_and_message():
  runner = FakeRunner(ScriptExecutionFailed("object not found", 17))
  result = await dispatch_tool("mark_read", MARK_READ_ARGS, runner)

  assert result.is_error
  assert result.content == "Error: AppleScript error (17): object not found"


async def test_missing_required_argument_runs_no_script():
  runner = FakeRunner()
  result = await dispatch_tool("search_emails", {"query": "invoice", "account_name": "Work"}, runner)

  assert result.is_error
  assert result.content.startswith("Error: query, mailbox, and account_name are required")
  assert runner.scripts == []


async def test_clear_flag_color():
  runner = FakeRunner("Flag color set to none")
  args = {"id": "7", "mailbox": "INBOX", "account_name": "Work", "color_index": -1}
  result = await dispatch_tool("set_flag_color", args, runner)

  assert result.content == "Flag color set to none"
  assert "set flag index of message id 7 of" in runner.scripts[0]
  assert "to -1" in runner.scripts[0]
  assert 'return "Flag color set to none"' in runner.scripts[0]


async def test_flag_color_labels():
  runner = FakeRunner()
  base = {"id": "7", "mailbox": "INBOX", "account_name": "Work"}
  await dispatch_tool("set_flag_color", {**base, "color_index": 2}, runner)
  await dispatch_tool("set_flag_color", {**base, "color_index": "9"}, runner)

  assert 'return "Flag color set to yellow"' in runner.scripts[0]
  assert "to 9" in runner.scripts[1]
  assert 'return "Flag color set to none"' in runner.scripts[1]


async def test_unknown_tool():
  runner = FakeRunner()
  result = await dispatch_tool("launch_rockets", {}, runner)
  assert result.is_error
  assert result.content == "Error: Unknown tool: launch_rockets"
  assert runner.scripts == []


async def test_non_numeric_message_id_runs_no_script():
  runner = FakeRunner()
  result = await dispatch_tool("delete_email", {"id": "1 or every message", "mailbox": "INBOX", "account_name": "W"}, runner)
  assert result.is_error
  assert result.content.startswith("Error: id must be a numeric message id")
  assert runner.scripts == []


async def test_script_creation_failure_is_an_error_result():
  runner = FakeRunner(ScriptCreationFailed())
  result = await dispatch_tool("list_rules", {}, runner)
  assert result.is_error
  assert result.content == "Error: Failed to create AppleScript"


async def test_unexpected_exception_is_contained(caplog):
  runner = FakeRunner(RuntimeError("kaboom"))
  with caplog.at_level(logging.ERROR, logger="apple_mail.helpers"):
    result = await dispatch_tool("list_signatures", {}, runner)
  assert result.is_error
  assert result.content == "Error: kaboom"
  assert "SETTINGS-ERR-" in caplog.text


async def test_error_is_logged_with_category_code(caplog):
  runner = FakeRunner(ScriptExecutionFailed("nope", -1728))
  with caplog.at_level(logging.ERROR, logger="apple_mail.helpers"):
    await dispatch_tool("list_mailboxes", {}, runner)
  assert "MAILBOX-ERR-" in caplog.text
  assert "list_mailboxes" in caplog.text


async def test_structured_output_is_deterministic():
  first = FakeRunner("true", ["me@work.com", "alias@work.com"])
  second = FakeRunner("true", ["me@work.com", "alias@work.com"])
  a = await dispatch_tool("get_account_info", {"account_name": "Work"}, first)
  b = await dispatch_tool("get_account_info", {"account_name": "Work"}, second)

  assert a.content == b.content
  assert a.content.index('"email_addresses"') < a.content.index('"enabled"') < a.content.index('"name"')
  assert json.loads(a.content)["enabled"] is True


async def test_list_emails_truncates_to_shortest_field(caplog):
  runner = FakeRunner(
    ["1", "2", "3", "4", "5"],
    ["s1", "s2", "s3", "s4", "s5"],
    ["a@x", "b@x", "c@x"],
  )
  with caplog.at_level(logging.WARNING):
    result = await dispatch_tool("list_emails", {"mailbox": "INBOX", "account_name": "Work"}, runner)

  emails = json.loads(result.content)
  assert len(runner.scripts) == 3
  assert emails == [
    {"id": "1", "sender": "a@x", "subject": "s1"},
    {"id": "2", "sender": "b@x", "subject": "s2"},
    {"id": "3", "sender": "c@x", "subject": "s3"},
  ]
  assert "truncating to 3" in caplog.text


async def test_list_emails_default_and_explicit_limit():
  runner = FakeRunner([], [], [])
  await dispatch_tool("list_emails", {"mailbox": "INBOX", "account_name": "Work"}, runner)
  assert "if n > 50 then set n to 50" in runner.scripts[0]

  runner = FakeRunner([], [], [])
  await dispatch_tool("list_emails", {"mailbox": "INBOX", "account_name": "Work", "limit": 5}, runner)
  assert "if n > 5 then set n to 5" in runner.scripts[0]


async def test_non_positive_limit_rejected():
  runner = FakeRunner()
  result = await dispatch_tool("search_emails", {"query": "q", "mailbox": "INBOX", "account_name": "W", "limit": 0}, runner)
  assert result.is_error
  assert "limit must be a positive integer" in result.content
  assert runner.scripts == []


async def test_search_escapes_query():
  runner = FakeRunner([])
  await dispatch_tool("search_emails", {"query": 'say "hi"', "mailbox": "INBOX", "account_name": "Work"}, runner)
  assert 'whose subject contains "say \\"hi\\""' in runner.scripts[0]
  assert "if (count of results) >= 20 then exit repeat" in runner.scripts[0]


async def test_get_email_reads_each_field():
  runner = FakeRunner("Hello", "Ann <ann@x.com>", "Body text", "Monday, 1 June 2026 at 10:00:00", True)
  result = await dispatch_tool("get_email", {"id": "42", "mailbox": "INBOX", "account_name": "Work"}, runner)

  assert json.loads(result.content) == {
    "id": "42",
    "subject": "Hello",
    "sender": "Ann <ann@x.com>",
    "content": "Body text",
    "date_received": "Monday, 1 June 2026 at 10:00:00",
    "read": True,
  }
  assert len(runner.scripts) == 5


async def test_get_email_fails_fast():
  runner = FakeRunner("Hello", ScriptExecutionFailed("Can't get sender", -1728), "never")
  result = await dispatch_tool("get_email", {"id": "42", "mailbox": "INBOX", "account_name": "Work"}, runner)
  assert result.is_error
  assert len(runner.scripts) == 2


async def test_unread_count_text():
  runner = FakeRunner(7)
  result = await dispatch_tool("get_unread_count", {"mailbox": "INBOX", "account_name": "Work"}, runner)
  assert result.content == "Unread count: 7"
  assert 'get unread count of mailbox "INBOX" of account "Work"' in runner.scripts[0]


async def test_unread_count_defaults_to_zero():
  runner = FakeRunner(None)
  result = await dispatch_tool("get_unread_count", {}, runner)
  assert result.content == "Unread count: 0"


async def test_metadata_types():
  runner = FakeRunner(False, True, False, 2048)
  result = await dispatch_tool("get_email_metadata", {"id": "3", "mailbox": "INBOX", "account_name": "W"}, runner)
  assert json.loads(result.content) == {
    "id": "3",
    "was_forwarded": False,
    "was_replied_to": True,
    "was_redirected": False,
    "size": 2048,
  }


async def test_mail_app_info_sentinels():
  runner = FakeRunner("16.0", None, True, 0)
  result = await dispatch_tool("get_mail_app_info", {}, runner)
  info = json.loads(result.content)
  assert info["version"] == "16.0"
  assert info["fetch_interval"] == -1
  assert info["background_activity_count"] == 0


async def test_compose_email_recipients():
  runner = FakeRunner("Email sent successfully")
  result = await dispatch_tool(
    "compose_email",
    {"to": ["a@x.com", 5], "subject": "Hi", "body": "Line 1\nLine 2", "cc": ["c@x.com"]},
    runner,
  )
  script = runner.scripts[0]
  assert result.content == "Email sent successfully"
  assert 'make new to recipient at end of to recipients with properties {address:"a@x.com"}' in script
  assert 'make new cc recipient at end of cc recipients with properties {address:"c@x.com"}' in script
  assert "bcc recipient" not in script
  assert 'content:"Line 1\\nLine 2"' in script
  assert "send newMessage" in script


async def test_reply_all():
  runner = FakeRunner("Reply sent successfully")
  args = {"id": "9", "mailbox": "INBOX", "account_name": "W", "body": "Thanks", "reply_all": "true"}
  await dispatch_tool("reply_email", args, runner)
  assert "reply originalMsg with opening window and reply to all" in runner.scripts[0]


async def test_open_mailto_requires_scheme():
  runner = FakeRunner()
  result = await dispatch_tool("open_mailto", {"url": "https://example.com"}, runner)
  assert result.is_error
  assert runner.scripts == []


async def test_background_color_must_be_known():
  runner = FakeRunner()
  args = {"id": "1", "mailbox": "INBOX", "account_name": "W", "color": "magenta"}
  result = await dispatch_tool("set_background_color", args, runner)
  assert result.is_error
  assert result.content.startswith("Error: color must be one of")


async def test_create_rule_script():
  runner = FakeRunner("Rule 'Invoices' created")
  result = await dispatch_tool(
    "create_rule",
    {
      "name": "Invoices",
      "conditions": [{"header": "subject", "qualifier": "contains", "expression": "invoice"}],
      "actions": {"move_message": "Finance", "account_name": "Work", "mark_read": True},
    },
    runner,
  )
  script = runner.scripts[0]
  assert result.content == "Rule 'Invoices' created"
  assert "rule type:subject header, qualifier:does contain value, expression:\"invoice\"" in script
  assert 'set move message of newRule to mailbox "Finance" of account "Work"' in script
  assert "set mark read of newRule to true" in script
  assert "mark flagged" not in script


async def test_create_rule_rejects_unknown_header():
  runner = FakeRunner()
  result = await dispatch_tool(
    "create_rule",
    {"name": "R", "conditions": [{"header": "x-priority", "expression": "1"}]},
    runner,
  )
  assert result.is_error
  assert runner.scripts == []


async def test_create_rule_rejects_non_object_conditions():
  runner = FakeRunner()
  result = await dispatch_tool("create_rule", {"name": "R", "conditions": ["subject contains x"]}, runner)
  assert result.is_error
  assert runner.scripts == []


async def test_save_attachment_requires_absolute_path():
  runner = FakeRunner()
  args = {"id": "1", "mailbox": "INBOX", "account_name": "W", "attachment_name": "a.pdf", "save_path": "relative/a.pdf"}
  result = await dispatch_tool("save_attachment", args, runner)
  assert result.is_error
  assert runner.scripts == []


async def test_special_mailboxes_one_query_each():
  runner = FakeRunner("INBOX", "Drafts", "Sent Messages", "Deleted Messages", "Junk", "Outbox")
  result = await dispatch_tool("get_special_mailboxes", {}, runner)
  assert json.loads(result.content) == {
    "inbox": "INBOX",
    "drafts": "Drafts",
    "sent": "Sent Messages",
    "trash": "Deleted Messages",
    "junk": "Junk",
    "outbox": "Outbox",
  }
  assert len(runner.scripts) == 6


async def test_check_for_new_mail_all_accounts():
  runner = FakeRunner("Checking for new mail in all accounts")
  result = await dispatch_tool("check_for_new_mail", {}, runner)
  assert result.content == "Checking for new mail in all accounts"
  assert "check for new mail\n" in runner.scripts[0]


async def test_search_builds_records_in_one_script():
  runner = FakeRunner([
    {"id": 101, "subject": "Invoice March", "sender": "billing@x.com"},
    {"id": 102, "subject": "Invoice April", "sender": "billing@x.com"},
  ])
  result = await dispatch_tool("search_emails", {"query": "Invoice", "mailbox": "INBOX", "account_name": "Work"}, runner)

  assert len(runner.scripts) == 1
  assert "set end of results to {|id|:id of msg, |subject|:subject of msg, |sender|:sender of msg}" in runner.scripts[0]
  assert json.loads(result.content) == [
    {"id": "101", "sender": "billing@x.com", "subject": "Invoice March"},
    {"id": "102", "sender": "billing@x.com", "subject": "Invoice April"},
  ]


async def test_compose_with_empty_subject_and_body():
  runner = FakeRunner("Email sent successfully")
  result = await dispatch_tool("compose_email", {"to": ["a@x.com"], "subject": "", "body": ""}, runner)

  assert not result.is_error
  assert result.content == "Email sent successfully"
  assert 'subject:"", content:""' in runner.scripts[0]


async def test_reply_with_empty_body():
  runner = FakeRunner("Reply sent successfully")
  args = {"id": "9", "mailbox": "INBOX", "account_name": "W", "body": ""}
  result = await dispatch_tool("reply_email", args, runner)
  assert result.content == "Reply sent successfully"


async def test_blank_names_rejected_before_any_script():
  cases = [
    ("get_account_info", {"account_name": "  "}, "account_name must not be empty"),
    ("list_emails", {"mailbox": "", "account_name": "Work"}, "mailbox must not be empty"),
    ("create_mailbox", {"name": "", "account_name": "Work"}, "name must not be empty"),
    ("delete_rule", {"name": " "}, "name must not be empty"),
    ("import_mailbox", {"path": ""}, "path must not be empty"),
    ("compose_email", {"to": [], "subject": "s", "body": "b"}, "to must list at least one recipient"),
  ]
  for name, args, message in cases:
    runner = FakeRunner()
    result = await dispatch_tool(name, args, runner)
    assert result.is_error, name
    assert result.content == f"Error: {message}"
    assert runner.scripts == []
