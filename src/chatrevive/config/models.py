"""Configuration dataclasses."""

from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class SlackConfig:
    """Slack connection settings."""

    bot_token: str
    app_token: str


@dataclass
class LLMConfig:
    """LLM settings (passed through to LiteLLM completion)."""

    model: str
    temperature: float = 0.9
    max_tokens: int = 256
    timeout_seconds: float = 15.0
    api_key: str | None = None
    api_base: str | None = None


@dataclass
class PersonaConfig:
    """Bot persona.

    Attributes:
        name: Display name used in prompts and fixed replies.
        system_prompt: Optional override for the built-in system prompt.
    """

    name: str
    system_prompt: str | None = None


@dataclass
class RevivalConfig:
    """Quiet-channel revival settings.

    Attributes:
        cooldown_seconds: Minimum time between two revival replies
            in the same channel.
        quiet_window_seconds: Trailing window used to count human messages.
        min_human_messages: Human messages inside the window that make
            a channel "active".
        history_limit: Messages fetched for the quiet check.
        context_limit: Messages fetched for the generation context.
        context_max_chars: Per-message character cap in the context.
    """

    cooldown_seconds: int = 60
    quiet_window_seconds: int = 300
    min_human_messages: int = 2
    history_limit: int = 100
    context_limit: int = 8
    context_max_chars: int = 200


@dataclass
class HealthConfig:
    """Health check listener settings."""

    enabled: bool = True
    port: int = 3000


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    loggers: dict[str, str] | None = None
    debug_llm_messages: bool = False


@dataclass
class Config:
    """Application configuration."""

    slack: SlackConfig
    llm: dict[str, LLMConfig]
    persona: PersonaConfig
    revival: RevivalConfig
    health: HealthConfig
    logging: LoggingConfig | None = None
