"""LLM revival reply generator."""

import logging

from chatrevive.domain.entities import RevivalContext
from chatrevive.infrastructure.llm.client import LLMClient
from chatrevive.infrastructure.llm.exceptions import LLMError
from chatrevive.infrastructure.llm.templates import create_jinja_env

logger = logging.getLogger(__name__)


class LiteLLMReplyGenerator:
    """LiteLLM-based ReplyGenerator implementation.

    Renders the system and revival prompts from Jinja2 templates and
    sends them to the LLM. Every LLM failure is logged and reported
    as None.
    """

    def __init__(
        self,
        client: LLMClient,
        *,
        debug_llm_messages: bool = False,
    ) -> None:
        """Initialize the generator.

        Args:
            client: LLMClient instance.
            debug_llm_messages: If True, log LLM messages at INFO level.
        """
        self._client = client
        self._debug_llm_messages = debug_llm_messages
        self._jinja_env = create_jinja_env()
        self._system_template = self._jinja_env.get_template("system_prompt.j2")
        self._revival_template = self._jinja_env.get_template("revival_prompt.j2")

    async def generate(self, context: RevivalContext) -> str | None:
        """Generate a revival reply.

        Args:
            context: Persona and recent conversation lines.

        Returns:
            Reply text, or None if generation failed.
        """
        messages = self.build_messages(context)

        if self._should_log():
            self._log_messages(messages)

        try:
            response = await self._client.complete(messages)
        except LLMError as e:
            logger.error("Revival reply generation failed: %s", e)
            return None

        if self._should_log():
            self._log_response(response)

        return response or None

    def build_messages(self, context: RevivalContext) -> list[dict[str, str]]:
        """Build the OpenAI-format message list for a context.

        Args:
            context: Persona and recent conversation lines.

        Returns:
            System and user messages.
        """
        persona = context.persona
        if persona.system_prompt:
            system_prompt = persona.system_prompt
        else:
            system_prompt = self._system_template.render(persona_name=persona.name)

        *context_lines, trigger_line = context.lines or ("",)
        user_prompt = self._revival_template.render(
            persona_name=persona.name,
            context_lines=context_lines,
            trigger_line=trigger_line,
        )

        return [
            {"role": "system", "content": system_prompt.strip()},
            {"role": "user", "content": user_prompt.strip()},
        ]

    def _should_log(self) -> bool:
        """Check if logging should occur."""
        return self._debug_llm_messages or logger.isEnabledFor(logging.DEBUG)

    def _log_messages(self, messages: list[dict[str, str]]) -> None:
        """Log LLM request messages."""
        log_func = logger.info if self._debug_llm_messages else logger.debug
        log_func("=== LLM Request Messages ===")
        for i, msg in enumerate(messages):
            role = msg.get("role", "unknown")
            content = msg.get("content", "")
            log_func("[%d] role=%s", i, role)
            log_func("    content: %s", content)
        log_func("=== End of Messages ===")

    def _log_response(self, response: str) -> None:
        """Log LLM response."""
        log_func = logger.info if self._debug_llm_messages else logger.debug
        log_func("=== LLM Response ===")
        log_func("response: %s", response)
        log_func("=== End of Response ===")
