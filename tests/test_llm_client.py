import json
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest
from openai import OpenAIError

from teamtracker.errors import UpstreamError
from teamtracker.llm_client import ReportWriter


class _FakeCompletions:
    def __init__(self, content: Any = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _writer(completions: _FakeCompletions) -> ReportWriter:
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return ReportWriter(api_key="sk-test", model="gpt-test", client=client)


def test_write_sends_instruction_and_json_context() -> None:
    completions = _FakeCompletions(content="  Season review\n- GA down  ")
    text = _writer(completions).write("Be a coach.", {"computed": {"gameCount": 3}})

    assert text == "Season review\n- GA down"
    call = completions.calls[0]
    assert call["model"] == "gpt-test"
    assert call["messages"][0] == {"role": "system", "content": "Be a coach."}
    assert json.loads(call["messages"][1]["content"]) == {"computed": {"gameCount": 3}}


def test_empty_content_is_empty_text() -> None:
    assert _writer(_FakeCompletions(content=None)).write("x", {}) == ""


def test_sdk_error_becomes_upstream_error() -> None:
    completions = _FakeCompletions(error=OpenAIError("quota exceeded"))
    with pytest.raises(UpstreamError) as excinfo:
        _writer(completions).write("x", {})
    assert excinfo.value.service == "OpenAI"
