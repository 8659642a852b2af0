"""
Shared test helpers.
"""

import json

import pytest


def envelope(payload) -> dict:
    """Wrap a payload the way a tool returns it: JSON text in content[0]."""
    return {"content": [{"type": "text", "text": json.dumps(payload)}]}


@pytest.fixture
def success_response():
    """Build a success response carrying payload."""
    def build(payload):
        return {"status": "success", "data": envelope(payload)}
    return build


@pytest.fixture
def make_test_case():
    """Build a plain-data test case."""
    def build(status="success", rules=None, case_id="case-1", tool_name="tool"):
        outcome = {"status": status}
        if rules is not None:
            outcome["validationRules"] = rules
        return {"id": case_id, "toolName": tool_name, "expectedOutcome": outcome}
    return build
