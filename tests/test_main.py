"""Tests for the application entry point."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from slack_sdk.errors import SlackApiError

from chatrevive.__main__ import configure_logging, main
from chatrevive.config import ConfigValidationError, LoggingConfig


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore logger levels after each test."""
    root = logging.getLogger()
    root_level = root.level
    formatters = [handler.formatter for handler in root.handlers]
    litellm_level = logging.getLogger("LiteLLM").level
    yield
    root.setLevel(root_level)
    for handler, formatter in zip(root.handlers, formatters):
        handler.setFormatter(formatter)
    logging.getLogger("LiteLLM").setLevel(litellm_level)


class TestConfigureLogging:
    """configure_logging tests."""

    def test_none_leaves_logging_untouched(self) -> None:
        """Test that a missing logging section changes nothing."""
        root = logging.getLogger()
        level = root.level

        configure_logging(None)

        assert root.level == level

    def test_sets_root_level(self) -> None:
        """Test that the root level follows the config."""
        configure_logging(LoggingConfig(level="debug"))

        assert logging.getLogger().level == logging.DEBUG

    def test_sets_individual_loggers(self) -> None:
        """Test that per-logger levels are applied."""
        configure_logging(LoggingConfig(loggers={"LiteLLM": "WARNING"}))

        assert logging.getLogger("LiteLLM").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Test that an unknown level name means INFO."""
        configure_logging(LoggingConfig(level="loud"))

        assert logging.getLogger().level == logging.INFO


class TestMainStartup:
    """Tests for startup failures in main."""

    @pytest.fixture
    def config_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> Path:
        """Point CHATREVIVE_CONFIG at an existing file."""
        path = tmp_path / "config.yaml"
        path.write_text("slack: {}\n", encoding="utf-8")
        monkeypatch.setenv("CHATREVIVE_CONFIG", str(path))
        return path

    async def test_missing_config_file_exits(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a missing config file exits with status 1."""
        monkeypatch.setenv("CHATREVIVE_CONFIG", str(tmp_path / "missing.yaml"))

        with pytest.raises(SystemExit) as exc_info:
            await main()

        assert exc_info.value.code == 1

    async def test_invalid_config_exits(self, config_path: Path) -> None:
        """Test that a config error exits with status 1."""
        with patch(
            "chatrevive.__main__.load_config",
            side_effect=ConfigValidationError("Required field 'slack' is missing"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                await main()

        assert exc_info.value.code == 1

    async def test_slack_auth_failure_exits(
        self, config_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a rejected bot token exits with status 1."""
        config = MagicMock()
        config.logging = None
        messaging_service = MagicMock()
        messaging_service.get_bot_user_id = AsyncMock(
            side_effect=SlackApiError(
                message="invalid_auth", response={"error": "invalid_auth"}
            )
        )

        with (
            patch("chatrevive.__main__.load_config", return_value=config),
            patch("chatrevive.__main__.create_slack_app", return_value=MagicMock()),
            patch(
                "chatrevive.__main__.SlackMessagingService",
                return_value=messaging_service,
            ),
        ):
            with pytest.raises(SystemExit) as exc_info:
                await main()

        assert exc_info.value.code == 1
        assert "Failed to authenticate with Slack" in caplog.text
