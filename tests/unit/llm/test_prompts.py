"""Tests for prompt construction."""

import pytest

from samarthaa.core.modules.llm.models import DocumentContext, GenerateRequest, GenerationMode
from samarthaa.core.modules.llm.prompts import (
    ASSISTANT_SYSTEM_PROMPT,
    DEFAULT_APPLICABLE_LAWS,
    DEFAULT_JURISDICTION,
    FORMAT_INSTRUCTIONS,
    build_assistant_system_prompt,
    build_generation_prompt,
)
from samarthaa.errors import ValidationError


class TestBuildGenerationPrompt:
    """Tests for build_generation_prompt."""

    def test_contract(self):
        request = GenerateRequest.model_validate(
            {"mode": "contract", "contractType": "Lease Agreement", "contractDetails": "Rent 20000 per month"}
        )
        mode, prompt = build_generation_prompt(request)
        assert mode == GenerationMode.CONTRACT
        assert "Draft a Lease Agreement" in prompt
        assert "Rent 20000 per month" in prompt
        assert prompt.endswith(FORMAT_INSTRUCTIONS)

    def test_research_default_jurisdiction(self):
        request = GenerateRequest.model_validate(
            {"mode": "research", "legalIssue": "Anticipatory bail", "researchQuery": "Section 438"}
        )
        mode, prompt = build_generation_prompt(request)
        assert mode == GenerationMode.RESEARCH
        assert DEFAULT_JURISDICTION in prompt

    def test_research_with_jurisdiction(self):
        request = GenerateRequest.model_validate(
            {
                "mode": "research",
                "legalIssue": "Anticipatory bail",
                "researchQuery": "Section 438",
                "jurisdiction": "Delhi High Court",
            }
        )
        _, prompt = build_generation_prompt(request)
        assert "Delhi High Court" in prompt
        assert DEFAULT_JURISDICTION not in prompt

    def test_opinion_default_laws(self):
        request = GenerateRequest.model_validate(
            {"mode": "opinion", "opinionTopic": "Tenancy", "opinionQuery": "Landlord refuses deposit"}
        )
        mode, prompt = build_generation_prompt(request)
        assert mode == GenerationMode.OPINION
        assert DEFAULT_APPLICABLE_LAWS in prompt

    def test_snake_case_fields_accepted(self):
        request = GenerateRequest(mode="contract", contract_type="NDA", contract_details="Two parties")
        _, prompt = build_generation_prompt(request)
        assert "Draft a NDA" in prompt

    def test_invalid_mode(self):
        with pytest.raises(ValidationError, match="Invalid mode"):
            build_generation_prompt(GenerateRequest(mode="poem"))

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({"mode": "contract", "contractType": "NDA"}, "contractType and contractDetails are required"),
            ({"mode": "contract", "contractType": "NDA", "contractDetails": "   "}, "contractType and contractDetails"),
            ({"mode": "research", "legalIssue": "Bail"}, "legalIssue and researchQuery are required"),
            ({"mode": "opinion", "opinionQuery": "Facts"}, "opinionTopic and opinionQuery are required"),
        ],
    )
    def test_missing_required_fields(self, body, message):
        with pytest.raises(ValidationError, match=message):
            build_generation_prompt(GenerateRequest.model_validate(body))


class TestBuildAssistantSystemPrompt:
    """Tests for build_assistant_system_prompt."""

    def test_without_document(self):
        assert build_assistant_system_prompt(None) == ASSISTANT_SYSTEM_PROMPT

    def test_empty_document_ignored(self):
        assert build_assistant_system_prompt(DocumentContext(mode="contract", content="")) == ASSISTANT_SYSTEM_PROMPT

    def test_with_document(self):
        prompt = build_assistant_system_prompt(DocumentContext(mode="opinion", content="OPINION TEXT"))
        assert prompt.startswith(ASSISTANT_SYSTEM_PROMPT)
        assert "Legal Opinion" in prompt
        assert "--- START OF DOCUMENT ---\nOPINION TEXT\n--- END OF DOCUMENT ---" in prompt

    def test_unknown_mode_label(self):
        prompt = build_assistant_system_prompt(DocumentContext(mode="memo", content="TEXT"))
        assert "Legal Document" in prompt
