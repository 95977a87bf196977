from datetime import datetime
from enum import StrEnum
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from samarthaa.core.db import MongoModel
from samarthaa.utils import now


class GenerationMode(StrEnum):
    """Kinds of legal documents the generator drafts."""

    CONTRACT = "contract"
    RESEARCH = "research"
    OPINION = "opinion"


class LLMOperationType(StrEnum):
    """LLM operation types recorded in logs."""

    CONTRACT = "contract"
    RESEARCH = "research"
    OPINION = "opinion"
    ASSISTANT = "assistant"


class CamelModel(BaseModel):
    """Request body accepting the browser client's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateRequest(CamelModel):
    """Structured form input for document generation.

    Which fields are required depends on mode; checked by the service so the
    client gets the same messages for every missing combination.
    """

    mode: str = Field(..., description="contract, research or opinion")
    contract_type: str | None = Field(None, description="Contract type, e.g. 'Lease Agreement'")
    contract_details: str | None = Field(None, description="Key terms of the contract")
    legal_issue: str | None = Field(None, description="Legal issue to research")
    research_query: str | None = Field(None, description="Context of the research")
    jurisdiction: str | None = Field(None, description="Preferred jurisdiction")
    opinion_topic: str | None = Field(None, description="Topic of the opinion")
    opinion_query: str | None = Field(None, description="Facts of the matter")
    applicable_laws: str | None = Field(None, description="Laws the opinion should consider")


class LLMUsage(BaseModel):
    """Token usage reported by the LLM provider."""

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class GenerateResponse(CamelModel):
    success: bool = True
    document_id: UUID
    output: str
    usage: LLMUsage


class ChatMessage(BaseModel):
    role: str
    content: str


class DocumentContext(CamelModel):
    """Previously generated document the assistant may discuss."""

    mode: str | None = None
    content: str | None = None


class AssistantRequest(CamelModel):
    message: str = ""
    history: list[ChatMessage] = Field(default_factory=list)
    document_context: DocumentContext | None = None
    current_mode: str | None = None


class AssistantResponse(BaseModel):
    reply: str
    usage: LLMUsage


class CompletionMessage(BaseModel):
    """Message in the shape sent to the LLM API."""

    role: Literal["system", "user", "assistant"]
    content: str


class LLMLog(MongoModel):
    """Log of LLM API interaction."""

    user_id: UUID
    operation_type: LLMOperationType
    system_prompt: str | None = None
    user_input: str
    llm_response: str | None = None

    model: str

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None

    error_message: str | None = None
    duration_ms: int
    created_at: datetime = Field(default_factory=now)
