"""LLM client wrapper."""

import logging
from typing import Any

import litellm
from litellm.exceptions import AuthenticationError, RateLimitError, Timeout

from chatrevive.config import LLMConfig
from chatrevive.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """LiteLLM wrapper client.

    This class provides a simplified interface to LiteLLM,
    applying configuration and handling errors.
    """

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the client.

        Args:
            config: LLM configuration (model, temperature, max_tokens, etc.).
        """
        self._config = config

    async def complete(
        self,
        messages: list[dict[str, str]],
        **kwargs: Any,
    ) -> str:
        """Execute chat completion.

        Args:
            messages: OpenAI-format message list.
                [{"role": "system", "content": "..."}, ...]
            **kwargs: Additional parameters (override config).

        Returns:
            Generated text, stripped of surrounding whitespace.

        Raises:
            LLMAuthenticationError: Invalid API key.
            LLMRateLimitError: Rate limit exceeded.
            LLMTimeoutError: Request timed out.
            LLMResponseError: Response had no usable content.
            LLMError: Other API errors.
        """
        params: dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "timeout": self._config.timeout_seconds,
            "messages": messages,
        }
        if self._config.api_key:
            params["api_key"] = self._config.api_key
        if self._config.api_base:
            params["api_base"] = self._config.api_base
        params.update(kwargs)

        logger.debug("LLM request: model=%s", params["model"])

        try:
            response = await litellm.acompletion(**params)
        except AuthenticationError as e:
            logger.error("LLM authentication error: %s", e)
            raise LLMAuthenticationError(str(e)) from e
        except RateLimitError as e:
            logger.warning("LLM rate limit exceeded: %s", e)
            raise LLMRateLimitError(str(e)) from e
        except Timeout as e:
            logger.warning("LLM request timed out: %s", e)
            raise LLMTimeoutError(str(e)) from e
        except Exception as e:
            logger.error("LLM error: %s", e)
            raise LLMError(str(e)) from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            logger.error("Malformed LLM response: %s", e)
            raise LLMResponseError(f"Malformed LLM response: {e}") from e

        if not isinstance(content, str) or not content.strip():
            raise LLMResponseError("LLM response has no content")

        logger.debug("LLM response received")
        return content.strip()
