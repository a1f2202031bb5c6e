"""Tests for context summarization."""

from chatrevive.domain.entities import User
from chatrevive.domain.services import build_context, format_context_line


class TestFormatContextLine:
    """Tests for format_context_line."""

    def test_formats_author_and_text(self, make_message) -> None:
        """Test the "<author>: <content>" format."""
        message = make_message("good morning")

        assert format_context_line(message, 200) == "alice: good morning"

    def test_collapses_newlines(self, make_message) -> None:
        """Test that line breaks become spaces."""
        message = make_message("line one\nline two\r\nline three")

        assert format_context_line(message, 200) == "alice: line one line two line three"

    def test_truncates_content(self, make_message) -> None:
        """Test that content is cut to the character cap."""
        message = make_message("x" * 500)

        line = format_context_line(message, 200)

        assert line == "alice: " + "x" * 200


class TestBuildContext:
    """Tests for build_context."""

    def test_empty_history(self) -> None:
        """Test that an empty history yields no lines."""
        assert build_context([], 8, 200) == []

    def test_keeps_chronological_order(self, make_message) -> None:
        """Test that lines stay oldest first."""
        messages = [
            make_message("first", seconds_ago=30),
            make_message("second", seconds_ago=20),
            make_message("third", seconds_ago=10),
        ]

        assert build_context(messages, 8, 200) == [
            "alice: first",
            "alice: second",
            "alice: third",
        ]

    def test_skips_bot_messages(self, make_message, bot: User) -> None:
        """Test that bot-authored messages are never included."""
        messages = [
            make_message("hi"),
            make_message("beep boop", user=bot),
            make_message("bye"),
        ]

        lines = build_context(messages, 8, 200)

        assert lines == ["alice: hi", "alice: bye"]
        assert not any(line.startswith("helperbot:") for line in lines)

    def test_takes_most_recent_messages(self, make_message) -> None:
        """Test that only the last max_messages are considered."""
        messages = [make_message(f"msg{i}", seconds_ago=100 - i) for i in range(12)]

        lines = build_context(messages, 8, 200)

        assert len(lines) == 8
        assert lines[0] == "alice: msg4"
        assert lines[-1] == "alice: msg11"

    def test_bot_messages_use_up_the_window(self, make_message, bot: User) -> None:
        """Test that bot messages count toward max_messages before filtering."""
        messages = [
            make_message("old human"),
            make_message("bot 1", user=bot),
            make_message("bot 2", user=bot),
        ]

        assert build_context(messages, 2, 200) == []

    def test_lines_are_bounded(self, make_message) -> None:
        """Test that every line's content is capped and single-line."""
        messages = [make_message("a\n" * 300) for _ in range(3)]

        lines = build_context(messages, 8, 50)

        for line in lines:
            content = line.split(": ", 1)[1]
            assert len(content) <= 50
            assert "\n" not in content

    def test_zero_max_messages(self, make_message) -> None:
        """Test that a zero limit yields no lines."""
        assert build_context([make_message()], 0, 200) == []

    def test_does_not_modify_input(self, make_message) -> None:
        """Test that the input sequence is left untouched."""
        messages = [make_message("a"), make_message("b")]
        snapshot = list(messages)

        build_context(messages, 1, 200)

        assert messages == snapshot
