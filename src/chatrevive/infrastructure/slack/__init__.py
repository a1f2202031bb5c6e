"""Slack integration."""

from chatrevive.infrastructure.slack.client import SlackAppRunner, create_slack_app
from chatrevive.infrastructure.slack.event_adapter import SlackEventAdapter
from chatrevive.infrastructure.slack.history import SlackConversationHistoryService
from chatrevive.infrastructure.slack.messaging import SlackMessagingService
from chatrevive.infrastructure.slack.users import SlackUserDirectory

__all__ = [
    "SlackAppRunner",
    "SlackConversationHistoryService",
    "SlackEventAdapter",
    "SlackMessagingService",
    "SlackUserDirectory",
    "create_slack_app",
]
