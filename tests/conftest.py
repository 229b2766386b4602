"""Shared fixtures: a ScriptRunner that never touches osascript."""

from __future__ import annotations

from typing import Any

import pytest

from apple_mail_mcp.client.script_runner import ScriptRunner
from apple_mail_mcp.config import BridgeConfig


class FakeRunner(ScriptRunner):
  """Records every script and replays queued results in order.

  Queued values are already-parsed script results (str, int, bool, list,
  dict or None). A queued exception is raised instead of returned.
  """

  def __init__(self, *results: Any) -> None:
    super().__init__(BridgeConfig())
    self.scripts: list[str] = []
    self.results: list[Any] = list(results)

  def queue(self, *results: Any) -> None:
    self.results.extend(results)

  async def execute(self, source: str) -> Any:
    self.scripts.append(source)
    if not self.results:
      return None
    result = self.results.pop(0)
    if isinstance(result, BaseException):
      raise result
    return result


@pytest.fixture
def runner() -> FakeRunner:
  return FakeRunner()
