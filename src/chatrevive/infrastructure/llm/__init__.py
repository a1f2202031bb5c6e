"""LLM integration."""

from chatrevive.infrastructure.llm.client import LLMClient
from chatrevive.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
)
from chatrevive.infrastructure.llm.reply_generator import LiteLLMReplyGenerator

__all__ = [
    "LLMAuthenticationError",
    "LLMClient",
    "LLMError",
    "LLMRateLimitError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LiteLLMReplyGenerator",
]
