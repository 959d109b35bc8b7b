"""Adapter Slack (notifier via incoming webhook)."""

from app.infra.slack.webhook_notifier import SlackWebhookNotifier, WebhookClientConfig

__all__ = ["SlackWebhookNotifier", "WebhookClientConfig"]
