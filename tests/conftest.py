"""Shared test fixtures and configuration."""

import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from toolbelt.config import HelperConfig, LLMProvider


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config_dir(temp_dir, mocker):
    """Point ~/.toolbelt at a temporary directory."""
    config_dir = temp_dir / ".toolbelt"
    mocker.patch("toolbelt.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def helper_config():
    """A resolved configuration pointing at a fake endpoint."""
    return HelperConfig(
        provider=LLMProvider.OPENAI,
        model="gpt-4o-mini",
        api_key="sk-test-key",
        base_url="https://api.example.test/v1",
    )


@pytest.fixture
def sample_staged_diff():
    """Sample staged diff for testing."""
    return """diff --git a/app/parser.py b/app/parser.py
index 1234567..abcdefg 100644
--- a/app/parser.py
+++ b/app/parser.py
@@ -10,2 +10,4 @@ def parse(value):
-    return value.strip()
+    if value is None:
+        return ""
+    return value.strip()
"""


def make_tool_call_body(arguments) -> str:
    """Build a chat-completion response body carrying a tool call."""
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return json.dumps({
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_1",
                            "type": "function",
                            "function": {
                                "name": "chatgpt_response_data",
                                "arguments": arguments,
                            },
                        }
                    ],
                },
                "finish_reason": "tool_calls",
            }
        ],
    })


@pytest.fixture
def commit_response_body():
    """Response body for the commit message used throughout the tests."""
    return make_tool_call_body({
        "subject": "fix: handle nil input",
        "body": "- guard against nil\n- add test",
    })


@pytest.fixture
def mock_client():
    """An OpenAI client stand-in whose raw create() can be scripted."""
    return MagicMock()


def raw_response(body: str) -> MagicMock:
    """Wrap a body the way with_raw_response.create() returns it."""
    raw = MagicMock()
    raw.http_response.text = body
    return raw


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def make_body():
    """Factory for tool-call response bodies."""
    return make_tool_call_body


@pytest.fixture
def make_raw_response():
    """Factory for raw SDK responses."""
    return raw_response
