"""Post notification messages to a Slack incoming webhook."""

import enum
import json
import logging
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from health_event_notifier.errors import DeliveryError

logger = logging.getLogger(__name__)


class DeliveryOutcome(enum.Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


def post_json(url, payload):
    try:
        req = Request(url, json.dumps(payload).encode("utf-8"), method="POST")
        req.add_header("Content-Type", "application/json")
        with urlopen(req) as response:
            response.read()
    except HTTPError as e:
        raise DeliveryError(f"Request failed: {e.code} {e.reason}") from e
    except URLError as e:
        raise DeliveryError(f"Server connection failed: {e.reason}") from e
    except (OSError, HTTPException, ValueError) as e:
        # Dropped connections, timeouts, truncated bodies and malformed URLs.
        raise DeliveryError(f"Request failed: {e!r}") from e


class SlackNotifier:
    """Deliver messages to one webhook.

    `webhook_url` is either the URL or a callable returning it; a callable
    is only invoked the first time the URL is needed.
    """

    def __init__(self, webhook_url, send=post_json):
        self._webhook_url = webhook_url
        self._send = send

    def resolve_webhook_url(self):
        if callable(self._webhook_url):
            self._webhook_url = self._webhook_url()
        return self._webhook_url

    def notify(self, message, do_not_send=False) -> DeliveryOutcome:
        channel = message.get("channel")

        if do_not_send:
            logger.info("Send message is turned off")
            return DeliveryOutcome.SKIPPED

        webhook_url = self.resolve_webhook_url()
        try:
            self._send(webhook_url, message)
        except DeliveryError as e:
            logger.error("Failed to send Slack message to %s: %s", channel, e)
            return DeliveryOutcome.FAILED

        logger.info("Successfully sent Slack message to %s", channel)
        return DeliveryOutcome.SENT
