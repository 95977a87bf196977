from typing import Any

from samarthaa.core.modules.llm.models import ChatMessage, CompletionMessage, LLMUsage

MAX_HISTORY_TURNS = 10


def trim_history(history: list[ChatMessage], limit: int = MAX_HISTORY_TURNS) -> list[CompletionMessage]:
    """Keep only user/assistant turns, most recent `limit` of them.

    System messages or unknown roles sent by the browser are dropped rather
    than rejected.
    """
    valid = [m for m in history if m.role in ("user", "assistant")]
    if limit <= 0:
        return []
    return [CompletionMessage(role=m.role, content=str(m.content)) for m in valid[-limit:]]  # type: ignore[arg-type]


def extract_usage(response: Any) -> LLMUsage:  # noqa: ANN401
    """Read token usage from a litellm response; missing stats become None."""
    usage = getattr(response, "usage", None)
    if not usage:
        return LLMUsage()
    return LLMUsage(
        prompt_tokens=getattr(usage, "prompt_tokens", None),
        completion_tokens=getattr(usage, "completion_tokens", None),
        total_tokens=getattr(usage, "total_tokens", None),
    )
