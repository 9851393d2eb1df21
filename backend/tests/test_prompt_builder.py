"""Tests for the synthesizer prompt: system prompt, schema and message window."""

import json

from backend.services.prompt_builder import (
    build_context_suffix,
    build_messages,
    build_system_prompt,
    response_schema,
)
from engine.kernel.types import Message, PersonalInfo, PortfolioData


def convo(n: int) -> list[Message]:
    """n alternating messages starting with the user."""
    return [Message("user" if i % 2 == 0 else "model", f"m{i}") for i in range(n)]


class TestSystemPrompt:
    def test_contains_instruction(self):
        prompt = build_system_prompt()
        assert "AI Portfolio Architect" in prompt
        assert "return the COMPLETE object" in prompt
        assert "minimal-light" in prompt

    def test_contains_schema(self):
        prompt = build_system_prompt()
        assert '"chatResponse"' in prompt
        assert '"personalInfo"' in prompt


class TestResponseSchema:
    def test_theme_is_closed_enum(self):
        schema = response_schema()
        theme = schema["$defs"]["PortfolioModel"]["properties"]["theme"]
        assert theme["enum"] == ["minimal-light", "modern-dark", "professional-blue", "creative-purple"]

    def test_uses_wire_names(self):
        schema = response_schema()
        assert "chatResponse" in schema["required"]
        assert "demoUrl" in schema["$defs"]["ProjectModel"]["properties"]


class TestContextSuffix:
    def test_null_without_portfolio(self):
        assert build_context_suffix(None) == "\n\n[SYSTEM: Current Portfolio State: null]"

    def test_serializes_portfolio(self):
        data = PortfolioData(personal_info=PersonalInfo(name="Ada", role="r", bio="b"))
        suffix = build_context_suffix(data)
        payload = suffix.removeprefix("\n\n[SYSTEM: Current Portfolio State: ").removesuffix("]")
        assert json.loads(payload) == data.to_dict()


class TestBuildMessages:
    def test_first_turn_drops_greeting(self):
        messages = build_messages([Message("model", "Hi! I'm your architect.")], None, "I'm Ada")
        assert messages == [{"role": "user", "content": "I'm Ada\n\n[SYSTEM: Current Portfolio State: null]"}]

    def test_roles_mapped(self):
        messages = build_messages(convo(2), None, "next")
        assert [m["role"] for m in messages] == ["user", "assistant", "user"]
        assert messages[1]["content"] == "m1"

    def test_window_keeps_trailing_messages(self):
        messages = build_messages(convo(20), None, "next", window=8)
        # m12..m19 → 8 messages (user first), plus the new turn
        assert [m["content"] for m in messages[:-1]] == [f"m{i}" for i in range(12, 20)]
        assert len(messages) == 9

    def test_window_drops_leading_model_message(self):
        messages = build_messages(convo(9), None, "next", window=8)
        # m1 (model) would lead, so the window starts at m2
        assert messages[0]["content"] == "m2"
        assert messages[0]["role"] == "user"

    def test_unanswered_user_message_folded_into_new_turn(self):
        history = [Message("user", "first try")]
        messages = build_messages(history, None, "second try")
        assert len(messages) == 1
        assert messages[0]["content"].startswith("first try\n\nsecond try")

    def test_zero_window(self):
        messages = build_messages(convo(4), None, "only", window=0)
        assert len(messages) == 1

    def test_roles_alternate(self):
        history = [Message("model", "g"), Message("user", "a"), Message("user", "b"), Message("model", "c")]
        messages = build_messages(history, None, "d")
        roles = [m["role"] for m in messages]
        assert all(a != b for a, b in zip(roles, roles[1:], strict=False))
        assert roles[0] == roles[-1] == "user"
