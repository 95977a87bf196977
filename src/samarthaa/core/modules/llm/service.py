import time
from typing import Any
from uuid import UUID, uuid4

import litellm
import structlog
from pymongo.asynchronous.database import AsyncDatabase

from samarthaa.core.core import Service
from samarthaa.core.modules.llm.models import (
    AssistantRequest,
    AssistantResponse,
    CompletionMessage,
    GenerateRequest,
    GenerateResponse,
    LLMLog,
    LLMOperationType,
    LLMUsage,
)
from samarthaa.core.modules.llm.prompts import build_assistant_system_prompt, build_generation_prompt
from samarthaa.core.modules.llm.utils import extract_usage, trim_history
from samarthaa.errors import ValidationError

logger = structlog.get_logger(__name__)


class LLMService(Service):
    """Turns form input and chat turns into LLM completions."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("llm_logs")

    async def on_start(self) -> None:
        """Create indexes for LLM logs."""
        await self._collection.create_index([("user_id", 1)])
        await self._collection.create_index([("created_at", -1)])

    async def generate_document(self, request: GenerateRequest, user_id: UUID) -> GenerateResponse:
        """Draft a contract, case research or legal opinion from structured form input."""
        mode, prompt = build_generation_prompt(request)
        logger.info("generation_requested", mode=mode, user_id=user_id)

        output, usage = await self._complete(
            operation_type=LLMOperationType(mode.value),
            messages=[CompletionMessage(role="user", content=prompt)],
            max_tokens=self.core.config.llm_max_tokens,
            user_id=user_id,
            user_input=prompt,
        )
        return GenerateResponse(document_id=uuid4(), output=output, usage=usage)

    async def ask_assistant(self, request: AssistantRequest, user_id: UUID) -> AssistantResponse:
        """Answer a conversational question, optionally about a generated document."""
        message = request.message.strip()
        if not message:
            raise ValidationError("No message provided")

        system_prompt = build_assistant_system_prompt(request.document_context)
        messages = [
            CompletionMessage(role="system", content=system_prompt),
            *trim_history(request.history),
            CompletionMessage(role="user", content=message),
        ]
        logger.info("assistant_requested", user_id=user_id, preview=message[:60])

        reply, usage = await self._complete(
            operation_type=LLMOperationType.ASSISTANT,
            messages=messages,
            max_tokens=self.core.config.assistant_max_tokens,
            user_id=user_id,
            user_input=message,
            system_prompt=system_prompt,
        )
        return AssistantResponse(reply=reply, usage=usage)

    async def _complete(
        self,
        operation_type: LLMOperationType,
        messages: list[CompletionMessage],
        max_tokens: int,
        user_id: UUID,
        user_input: str,
        system_prompt: str | None = None,
    ) -> tuple[str, LLMUsage]:
        """Call the LLM and record the interaction whether it succeeds or not."""
        start_time = time.time()
        content: str | None = None
        usage = LLMUsage()
        error_message: str | None = None

        try:
            if not self.core.config.llm_api_key:
                raise ValidationError("LLM API key not configured")  # noqa: TRY301

            response = await litellm.acompletion(
                model=self.core.config.llm_model,
                messages=[m.model_dump() for m in messages],
                max_tokens=max_tokens,
                api_key=self.core.config.llm_api_key,
            )
            usage = extract_usage(response)
            content = response.choices[0].message.content
            if not content:
                raise ValidationError("LLM returned empty response")  # noqa: TRY301
        except Exception as e:
            error_message = str(e)
            logger.warning("llm_call_failed", operation_type=operation_type, error=error_message)
            raise
        else:
            logger.info("llm_call_completed", operation_type=operation_type, total_tokens=usage.total_tokens)
            return content, usage
        finally:
            log = LLMLog(
                user_id=user_id,
                operation_type=operation_type,
                system_prompt=system_prompt,
                user_input=user_input,
                llm_response=content,
                model=self.core.config.llm_model,
                prompt_tokens=usage.prompt_tokens,
                completion_tokens=usage.completion_tokens,
                total_tokens=usage.total_tokens,
                error_message=error_message,
                duration_ms=int((time.time() - start_time) * 1000),
            )
            await self._collection.insert_one(log.to_mongo())
