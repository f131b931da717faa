import os
from dataclasses import dataclass
from typing import Optional

from health_event_notifier.errors import ConfigurationError

# The AWS Health API global endpoint lives in us-east-1.
DEFAULT_HEALTH_REGION = "us-east-1"
DEFAULT_SLACK_EMOJI = ":boom:"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def parse_bool(value) -> bool:
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class NotifierConfig:
    slack_channel: str
    region: Optional[str] = None
    health_region: str = DEFAULT_HEALTH_REGION
    do_not_send: bool = False
    profile: Optional[str] = None
    slack_emoji: str = DEFAULT_SLACK_EMOJI
    ssm_webhook_parameter: Optional[str] = None

    def __post_init__(self):
        if not self.slack_channel:
            raise ConfigurationError("SLACK_CHANNEL is required")
        if not self.do_not_send and not self.ssm_webhook_parameter:
            raise ConfigurationError(
                "SSM_SLACK_WEBHOOK_URL is required unless DO_NOT_SEND_MESSAGE is set"
            )

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(
            slack_channel=environ.get("SLACK_CHANNEL", ""),
            region=environ.get("REGION") or environ.get("AWS_REGION") or None,
            health_region=environ.get("AWS_HEALTH_REGION") or DEFAULT_HEALTH_REGION,
            do_not_send=parse_bool(environ.get("DO_NOT_SEND_MESSAGE")),
            profile=environ.get("AWS_PROFILE") or None,
            slack_emoji=environ.get("SLACK_EMOJI") or DEFAULT_SLACK_EMOJI,
            ssm_webhook_parameter=environ.get("SSM_SLACK_WEBHOOK_URL") or None,
        )
