"""Tests for LLMService with the provider call replaced."""

from types import SimpleNamespace
from uuid import uuid4

import litellm
import pytest

from samarthaa.core.modules.llm.models import AssistantRequest, GenerateRequest, LLMOperationType
from samarthaa.core.modules.llm.service import LLMService
from samarthaa.errors import ValidationError


def completion(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=12, completion_tokens=34, total_tokens=46),
    )


@pytest.fixture
def calls(monkeypatch):
    """Records litellm.acompletion calls and answers with a fixed document."""
    recorded: list[dict] = []

    async def fake_acompletion(**kwargs):
        recorded.append(kwargs)
        return completion("LEASE AGREEMENT\n1. Parties")

    monkeypatch.setattr(litellm, "acompletion", fake_acompletion)
    return recorded


@pytest.fixture
def llm_service(fake_database, config):
    service = LLMService(fake_database)
    service.set_core(SimpleNamespace(config=config))
    return service


def llm_logs(fake_database):
    return fake_database.get_collection("llm_logs").docs


@pytest.mark.asyncio
class TestGenerateDocument:
    """Tests for LLMService.generate_document."""

    async def test_generates_and_logs(self, llm_service, calls, fake_database, config):
        user_id = uuid4()
        request = GenerateRequest(mode="contract", contract_type="Lease Agreement", contract_details="Rent 20000")

        response = await llm_service.generate_document(request, user_id)

        assert response.success is True
        assert response.output == "LEASE AGREEMENT\n1. Parties"
        assert response.usage.total_tokens == 46
        assert calls[0]["model"] == config.llm_model
        assert calls[0]["max_tokens"] == config.llm_max_tokens
        assert calls[0]["messages"][0]["role"] == "user"

        [log] = llm_logs(fake_database)
        assert log["user_id"] == user_id
        assert log["operation_type"] == LLMOperationType.CONTRACT
        assert log["llm_response"] == "LEASE AGREEMENT\n1. Parties"
        assert log["error_message"] is None

    async def test_invalid_form_does_not_call_llm(self, llm_service, calls, fake_database):
        with pytest.raises(ValidationError):
            await llm_service.generate_document(GenerateRequest(mode="contract"), uuid4())
        assert calls == []
        assert llm_logs(fake_database) == []

    async def test_missing_api_key(self, llm_service, calls, fake_database, config):
        config.llm_api_key = ""
        request = GenerateRequest(mode="opinion", opinion_topic="Tenancy", opinion_query="Deposit")

        with pytest.raises(ValidationError, match="LLM API key not configured"):
            await llm_service.generate_document(request, uuid4())

        assert calls == []
        [log] = llm_logs(fake_database)
        assert log["error_message"] == "LLM API key not configured"

    async def test_provider_failure_is_logged(self, llm_service, fake_database, monkeypatch):
        async def failing(**kwargs):
            raise RuntimeError("provider down")

        monkeypatch.setattr(litellm, "acompletion", failing)
        request = GenerateRequest(mode="research", legal_issue="Bail", research_query="438")

        with pytest.raises(RuntimeError):
            await llm_service.generate_document(request, uuid4())
        assert llm_logs(fake_database)[0]["error_message"] == "provider down"

    async def test_empty_completion(self, llm_service, fake_database, monkeypatch):
        async def empty(**kwargs):
            return completion("")

        monkeypatch.setattr(litellm, "acompletion", empty)
        request = GenerateRequest(mode="research", legal_issue="Bail", research_query="438")

        with pytest.raises(ValidationError, match="empty response"):
            await llm_service.generate_document(request, uuid4())


@pytest.mark.asyncio
class TestAskAssistant:
    """Tests for LLMService.ask_assistant."""

    async def test_builds_conversation(self, llm_service, calls, config):
        request = AssistantRequest.model_validate(
            {
                "message": "  What is clause 1?  ",
                "history": [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}],
                "documentContext": {"mode": "contract", "content": "LEASE AGREEMENT"},
            }
        )

        response = await llm_service.ask_assistant(request, uuid4())

        assert response.reply == "LEASE AGREEMENT\n1. Parties"
        messages = calls[0]["messages"]
        assert [m["role"] for m in messages] == ["system", "user", "assistant", "user"]
        assert "LEASE AGREEMENT" in messages[0]["content"]
        assert messages[-1]["content"] == "What is clause 1?"
        assert calls[0]["max_tokens"] == config.assistant_max_tokens

    async def test_empty_message(self, llm_service, calls):
        with pytest.raises(ValidationError, match="No message provided"):
            await llm_service.ask_assistant(AssistantRequest(message="   "), uuid4())
        assert calls == []
