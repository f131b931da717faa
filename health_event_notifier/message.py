from health_event_notifier.enricher import AffectedEntity
from health_event_notifier.event import PERSONAL_HEALTH_DASHBOARD_URL, HealthEvent

TITLE = "AWS Health Notification"
COLOR = "danger"
NO_DESCRIPTION = "no description found in health check"


def _field(title, value):
    return {"title": title, "value": value, "short": False}


def build_message(
    event: HealthEvent, entity: AffectedEntity, channel: str, icon_emoji: str
) -> dict:
    description = NO_DESCRIPTION
    if event.descriptions:
        description = event.latest_description

    attachment = {
        "title": TITLE,
        "title_link": PERSONAL_HEALTH_DASHBOARD_URL,
        "color": COLOR,
        "fields": [
            _field("Service", event.service),
            _field("Description", description),
            _field("EventTypeCode", event.event_type_code),
            _field("Link", event.event_url),
            _field("AWS Account ID", entity.account_id),
            _field("Entity Value", entity.entity_value),
        ],
    }

    return {
        "channel": channel,
        "icon_emoji": icon_emoji,
        "attachments": [attachment],
    }
