"""Run one AWS Health event through decode, enrich, build and notify."""

import enum
import logging
from dataclasses import dataclass

from health_event_notifier.config import NotifierConfig
from health_event_notifier.enricher import describe_affected_entity
from health_event_notifier.errors import DecodeError, EnrichmentError
from health_event_notifier.event import decode_event
from health_event_notifier.message import build_message
from health_event_notifier.notifier import DeliveryOutcome, SlackNotifier

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    ABORTED_AT_DECODE = "aborted-at-decode"
    ABORTED_AT_ENRICH = "aborted-at-enrich"
    NOTIFIED_SENT = "notified-sent"
    NOTIFIED_SKIPPED = "notified-skipped"
    NOTIFIED_DELIVERY_FAILED = "notified-delivery-failed"

    @property
    def aborted(self):
        return self in (Outcome.ABORTED_AT_DECODE, Outcome.ABORTED_AT_ENRICH)


_DELIVERY_OUTCOMES = {
    DeliveryOutcome.SENT: Outcome.NOTIFIED_SENT,
    DeliveryOutcome.SKIPPED: Outcome.NOTIFIED_SKIPPED,
    DeliveryOutcome.FAILED: Outcome.NOTIFIED_DELIVERY_FAILED,
}


@dataclass(frozen=True)
class PipelineContext:
    config: NotifierConfig
    health_client: object
    notifier: SlackNotifier


class NotificationPipeline:
    def __init__(self, context: PipelineContext):
        self.context = context

    def run(self, raw_event) -> Outcome:
        outcome = self._run(raw_event)
        logger.info("Invocation finished: %s", outcome.value)
        return outcome

    def _run(self, raw_event):
        config = self.context.config

        try:
            event = decode_event(raw_event)
        except DecodeError as e:
            logger.error("Unable to decode health event (stage=decode): %s", e)
            return Outcome.ABORTED_AT_DECODE

        # ConfigurationError from the secret lookup is fatal and propagates.
        if not config.do_not_send:
            self.context.notifier.resolve_webhook_url()

        try:
            entity = describe_affected_entity(
                self.context.health_client, event.event_arn
            )
        except EnrichmentError as e:
            logger.error("Unable to enrich health event (stage=enrich): %s", e)
            return Outcome.ABORTED_AT_ENRICH

        message = build_message(
            event, entity, config.slack_channel, config.slack_emoji
        )
        delivery = self.context.notifier.notify(message, config.do_not_send)
        return _DELIVERY_OUTCOMES[delivery]
