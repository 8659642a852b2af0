"""
Unit tests for natural-language query generation.

The Anthropic client is replaced by a stub; no network access is needed.
"""

import json
from types import SimpleNamespace

import pytest
from toolprobe.llm import QueryGenerator, build_prompt
from toolprobe.validation import ToolDefinition


class StubMessages:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def make_client(response=None, error=None):
    return SimpleNamespace(messages=StubMessages(response=response, error=error))


@pytest.fixture
def tool():
    return ToolDefinition(
        name="get_forecast",
        description="Get the weather forecast for a city",
        input_schema={"type": "object", "properties": {"city": {"type": "string"}}}
    )


def test_build_prompt(tool):
    prompt = build_prompt(tool)

    assert prompt.startswith("You are a user who wants to call the following tool.")
    assert "Name: get_forecast" in prompt
    assert "Description: Get the weather forecast for a city" in prompt
    assert json.dumps({"city": {"type": "string"}}, indent=2) in prompt


def test_build_prompt_without_schema():
    prompt = build_prompt(ToolDefinition(name="ping"))
    assert prompt.endswith("Parameters: {}")


def test_generates_stripped_text(tool):
    response = SimpleNamespace(content=[SimpleNamespace(type="text", text="  What's the weather in Oslo?\n")])
    client = make_client(response=response)

    generator = QueryGenerator(client=client, model="test-model")

    assert generator.generate_natural_language_query(tool) == "What's the weather in Oslo?"

    call = client.messages.calls[0]
    assert call["model"] == "test-model"
    assert call["max_tokens"] == 100
    assert call["temperature"] == 0.7
    assert call["messages"] == [{"role": "user", "content": build_prompt(tool)}]


def test_default_model(monkeypatch):
    monkeypatch.delenv("CLAUDE_MODEL", raising=False)

    generator = QueryGenerator(client=make_client())
    assert generator.model == "claude-3-7-sonnet-20250219"


def test_model_from_environment(monkeypatch):
    monkeypatch.setenv("CLAUDE_MODEL", "claude-env-model")

    assert QueryGenerator(client=make_client()).model == "claude-env-model"
    assert QueryGenerator(client=make_client(), model="claude-explicit").model == "claude-explicit"


def test_non_text_block_returns_empty(tool):
    response = SimpleNamespace(content=[SimpleNamespace(type="tool_use", id="x")])
    generator = QueryGenerator(client=make_client(response=response))

    assert generator.generate_natural_language_query(tool) == ""


def test_empty_content_returns_empty(tool):
    generator = QueryGenerator(client=make_client(response=SimpleNamespace(content=[])))
    assert generator.generate_natural_language_query(tool) == ""


def test_api_failure_returns_empty(tool, caplog):
    generator = QueryGenerator(client=make_client(error=RuntimeError("rate limited")))

    with caplog.at_level("ERROR", logger="toolprobe.llm.query_generator"):
        assert generator.generate_natural_language_query(tool) == ""

    assert "rate limited" in caplog.text


def test_tool_definition_from_dict():
    tool = ToolDefinition.from_dict({
        "name": "get_forecast",
        "description": "Forecast",
        "inputSchema": {"properties": {"city": {"type": "string"}}},
    })

    assert tool.input_schema == {"properties": {"city": {"type": "string"}}}
