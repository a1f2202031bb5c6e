"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from chatrevive.config.models import (
    DEFAULT_LOG_FORMAT,
    Config,
    HealthConfig,
    LLMConfig,
    LoggingConfig,
    PersonaConfig,
    RevivalConfig,
    SlackConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME} または ${VAR_NAME:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    ${VAR_NAME:-default} 形式の場合、未設定なら default を使う。

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定（デフォルトなし）
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        env_value = os.environ.get(var_name)
        if env_value is None:
            if default is not None:
                return default
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する

    Args:
        data: 展開対象のデータ（dict, list, str, その他）

    Returns:
        環境変数が展開されたデータ
    """
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない、または空文字列
    """
    full_path = f"{parent}.{field}" if parent else field
    if not isinstance(data, dict) or field not in data or data[field] is None:
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    if isinstance(data[field], str) and not data[field].strip():
        raise ConfigValidationError(f"Required field '{full_path}' is empty")
    return data[field]


def _as_int(value: Any, path: str, minimum: int = 1) -> int:
    """整数値に変換し、下限を検証する

    環境変数展開後の文字列も受け付ける。

    Raises:
        ConfigValidationError: 整数でない、または下限未満
    """
    try:
        result = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(
            f"Field '{path}' must be an integer: {value!r}"
        ) from e
    if result < minimum:
        raise ConfigValidationError(f"Field '{path}' must be >= {minimum}: {result}")
    return result


def _as_float(value: Any, path: str, greater_than: float | None = None) -> float:
    """浮動小数点数に変換し、下限（その値自体は不可）を検証する

    Raises:
        ConfigValidationError: 数値でない、または下限以下
    """
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"Field '{path}' must be a number: {value!r}") from e
    if greater_than is not None and result <= greater_than:
        raise ConfigValidationError(
            f"Field '{path}' must be > {greater_than}: {result}"
        )
    return result


def _as_bool(value: Any) -> bool:
    """真偽値に変換する（"true", "1", "yes" などの文字列も受け付ける）"""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _load_llm(llm_data: dict[str, Any]) -> dict[str, LLMConfig]:
    """llm セクションを読み込む（default は必須）"""
    _validate_required_field(llm_data, "default", "llm")
    llm: dict[str, LLMConfig] = {}
    for key, llm_item in llm_data.items():
        model = _validate_required_field(llm_item, "model", f"llm.{key}")
        llm[key] = LLMConfig(
            model=model,
            temperature=_as_float(
                llm_item.get("temperature", 0.9), f"llm.{key}.temperature"
            ),
            max_tokens=_as_int(
                llm_item.get("max_tokens", 256), f"llm.{key}.max_tokens"
            ),
            timeout_seconds=_as_float(
                llm_item.get("timeout_seconds", 15.0),
                f"llm.{key}.timeout_seconds",
                greater_than=0,
            ),
            api_key=llm_item.get("api_key") or None,
            api_base=llm_item.get("api_base") or None,
        )
    return llm


def _load_revival(revival_data: dict[str, Any]) -> RevivalConfig:
    """revival セクションを読み込む（全項目オプション）"""
    defaults = RevivalConfig()
    return RevivalConfig(
        cooldown_seconds=_as_int(
            revival_data.get("cooldown_seconds", defaults.cooldown_seconds),
            "revival.cooldown_seconds",
        ),
        quiet_window_seconds=_as_int(
            revival_data.get("quiet_window_seconds", defaults.quiet_window_seconds),
            "revival.quiet_window_seconds",
        ),
        min_human_messages=_as_int(
            revival_data.get("min_human_messages", defaults.min_human_messages),
            "revival.min_human_messages",
        ),
        history_limit=_as_int(
            revival_data.get("history_limit", defaults.history_limit),
            "revival.history_limit",
        ),
        context_limit=_as_int(
            revival_data.get("context_limit", defaults.context_limit),
            "revival.context_limit",
        ),
        context_max_chars=_as_int(
            revival_data.get("context_max_chars", defaults.context_max_chars),
            "revival.context_max_chars",
        ),
    )


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 必須項目が欠落、または値が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f) or {}

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    # 必須セクションの検証
    slack_data = _validate_required_field(data, "slack")
    llm_data = _validate_required_field(data, "llm")
    persona_data = _validate_required_field(data, "persona")

    # SlackConfig
    slack = SlackConfig(
        bot_token=_validate_required_field(slack_data, "bot_token", "slack"),
        app_token=_validate_required_field(slack_data, "app_token", "slack"),
    )

    llm = _load_llm(llm_data)

    # PersonaConfig
    persona = PersonaConfig(
        name=_validate_required_field(persona_data, "name", "persona"),
        system_prompt=persona_data.get("system_prompt") or None,
    )

    revival = _load_revival(data.get("revival") or {})

    # HealthConfig (optional)
    health_data = data.get("health") or {}
    health = HealthConfig(
        enabled=_as_bool(health_data.get("enabled", True)),
        port=_as_int(health_data.get("port", 3000), "health.port", minimum=0),
    )

    # LoggingConfig (optional)
    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data:
        logging_config = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get("format", DEFAULT_LOG_FORMAT),
            loggers=logging_data.get("loggers"),
            debug_llm_messages=_as_bool(
                logging_data.get("debug_llm_messages", False)
            ),
        )

    return Config(
        slack=slack,
        llm=llm,
        persona=persona,
        revival=revival,
        health=health,
        logging=logging_config,
    )
