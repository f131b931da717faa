"""Decode the EventBridge envelope of an AWS Health event."""

import json
from dataclasses import dataclass, field
from typing import Optional, Tuple

from health_event_notifier.errors import DecodeError

PERSONAL_HEALTH_DASHBOARD_URL = "https://phd.aws.amazon.com/phd/home"


@dataclass(frozen=True)
class EventDescription:
    language: str
    latest: str


@dataclass(frozen=True)
class HealthEvent:
    event_arn: str
    service: str = ""
    event_type_code: str = ""
    event_type_category: str = ""
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    descriptions: Tuple[EventDescription, ...] = field(default_factory=tuple)
    region: str = ""

    @property
    def latest_description(self) -> Optional[str]:
        if not self.descriptions:
            return None
        return self.descriptions[-1].latest

    @property
    def event_url(self) -> str:
        return (
            f"{PERSONAL_HEALTH_DASHBOARD_URL}?region={self.region}"
            f"#/event-log?eventID={self.event_arn}&eventTab=details&layout=vertical"
        )


def region_from_arn(arn):
    # arn:aws:health:<region>::event/<service>/<code>/<id>
    parts = arn.split(":")
    if len(parts) > 3 and parts[0] == "arn":
        return parts[3]
    return ""


def _optional_str(detail, key):
    value = detail.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _load_detail(detail):
    if isinstance(detail, (str, bytes, bytearray)):
        try:
            detail = json.loads(detail)
        except ValueError as e:
            raise DecodeError(f"'detail' is not valid JSON: {e}") from e
    if not isinstance(detail, dict):
        raise DecodeError("'detail' must be a JSON object")
    return detail


def _decode_descriptions(detail):
    entries = detail.get("eventDescription")
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise DecodeError("'eventDescription' must be a list")

    descriptions = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise DecodeError("'eventDescription' entries must be objects")
        descriptions.append(
            EventDescription(
                language=_optional_str(entry, "language"),
                latest=_optional_str(entry, "latestDescription"),
            )
        )
    return tuple(descriptions)


def decode_event(raw_event) -> HealthEvent:
    if not isinstance(raw_event, dict):
        raise DecodeError("event envelope must be a JSON object")
    if "detail" not in raw_event:
        raise DecodeError("event envelope has no 'detail'")

    detail = _load_detail(raw_event["detail"])

    event_arn = detail.get("eventArn") or detail.get("arn")
    if not isinstance(event_arn, str) or not event_arn.strip():
        raise DecodeError("'eventArn' is missing or empty")

    region = raw_event.get("region")
    if not isinstance(region, str) or not region:
        region = region_from_arn(event_arn)

    return HealthEvent(
        event_arn=event_arn,
        service=_optional_str(detail, "service"),
        event_type_code=_optional_str(detail, "eventTypeCode"),
        event_type_category=_optional_str(detail, "eventTypeCategory"),
        start_time=detail.get("startTime"),
        end_time=detail.get("endTime"),
        descriptions=_decode_descriptions(detail),
        region=region,
    )
