"""設定管理モジュール"""

from chatrevive.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from chatrevive.config.models import (
    Config,
    HealthConfig,
    LLMConfig,
    LoggingConfig,
    PersonaConfig,
    RevivalConfig,
    SlackConfig,
)

__all__ = [
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "HealthConfig",
    "LLMConfig",
    "LoggingConfig",
    "PersonaConfig",
    "RevivalConfig",
    "SlackConfig",
    "expand_env_vars",
    "load_config",
]
