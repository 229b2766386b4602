from __future__ import annotations

import pytest

from apple_mail_mcp.client.parsers import (
  ScriptOutputError,
  as_list,
  as_records,
  as_text,
  parse_bool,
  parse_int,
  parse_script_output,
)


def test_scalars():
  assert parse_script_output("42\n") == 42
  assert parse_script_output("-3\n") == -3
  assert parse_script_output("2.5\n") == 2.5
  assert parse_script_output("true\n") is True
  assert parse_script_output("false\n") is False
  assert parse_script_output("missing value\n") is None


def test_empty_output():
  assert parse_script_output("") is None
  assert parse_script_output("\n") is None
  assert parse_script_output('""\n') == ""


def test_string_with_escapes():
  assert parse_script_output('"say \\"hi\\"\\nbye"\n') == 'say "hi"\nbye'


def test_list_of_strings():
  assert parse_script_output('{"INBOX", "Sent", "Drafts"}\n') == ["INBOX", "Sent", "Drafts"]
  assert parse_script_output("{}\n") == []


def test_list_of_mixed_scalars():
  assert parse_script_output('{1, "two", true, missing value}\n') == [1, "two", True, None]


def test_nested_list():
  assert parse_script_output('{{1, 2}, "a"}\n') == [[1, 2], "a"]


def test_record():
  assert parse_script_output('{name:"Work", enabled:true, |id|:3}\n') == {
    "name": "Work",
    "enabled": True,
    "id": 3,
  }


def test_record_key_with_space():
  assert parse_script_output('{date received:"today"}\n') == {"date received": "today"}


def test_date_literal():
  assert parse_script_output('date "Monday, 1 June 2026 at 10:00:00"\n') == "Monday, 1 June 2026 at 10:00:00"


def test_object_specifier_kept_as_text():
  assert parse_script_output('mailbox "INBOX" of account "Work"\n') == 'mailbox "INBOX" of account "Work"'
  assert parse_script_output('{mailbox "A" of account "W", mailbox "B" of account "W"}\n') == [
    'mailbox "A" of account "W"',
    'mailbox "B" of account "W"',
  ]


def test_trailing_text_returns_raw():
  assert parse_script_output('"a" b\n') == '"a" b'


def test_unterminated_string_raises():
  with pytest.raises(ScriptOutputError):
    parse_script_output('"abc\n')


def test_as_text():
  assert as_text("x") == "x"
  assert as_text(None) == ""
  assert as_text(True) == "true"
  assert as_text(False) == "false"
  assert as_text(7) == "7"
  assert as_text(3.0) == "3"
  assert as_text(2.5) == "2.5"
  assert as_text(["a"]) == ""


def test_as_list():
  assert as_list(None) == []
  assert as_list("only") == ["only"]
  assert as_list(["a", 1, None, ["nested"], True]) == ["a", "1", "true"]
  assert as_list({"name": "x"}) == []


def test_parse_bool():
  assert parse_bool("true") is True
  assert parse_bool("false") is False
  assert parse_bool("True") is False
  assert parse_bool("") is False


def test_parse_int():
  assert parse_int("12") == 12
  assert parse_int(" 7 ") == 7
  assert parse_int("", 0) == 0
  assert parse_int("n/a", -1) == -1


def test_as_records():
  value = parse_script_output('{{|id|:101, subject:"Hi", sender:"a@x.com"}, missing value}\n')
  assert as_records(value) == [{"id": "101", "subject": "Hi", "sender": "a@x.com"}]
  assert as_records({"id": 1}) == [{"id": "1"}]
  assert as_records(None) == []
  assert as_records(["text"]) == []
