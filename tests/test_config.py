import pytest

from health_event_notifier.config import NotifierConfig, parse_bool
from health_event_notifier.errors import ConfigurationError


def test_from_env_defaults():
    config = NotifierConfig.from_env(
        {"SLACK_CHANNEL": "#aws-health", "SSM_SLACK_WEBHOOK_URL": "/slack/webhook"}
    )

    assert config.slack_channel == "#aws-health"
    assert config.slack_emoji == ":boom:"
    assert config.health_region == "us-east-1"
    assert config.do_not_send is False
    assert config.region is None
    assert config.profile is None


def test_from_env_reads_every_option():
    config = NotifierConfig.from_env(
        {
            "SLACK_CHANNEL": "#ops",
            "SLACK_EMOJI": ":rotating_light:",
            "REGION": "eu-west-2",
            "AWS_HEALTH_REGION": "us-east-2",
            "AWS_PROFILE": "prod",
            "DO_NOT_SEND_MESSAGE": "true",
            "SSM_SLACK_WEBHOOK_URL": "/slack/webhook",
        }
    )

    assert config == NotifierConfig(
        slack_channel="#ops",
        region="eu-west-2",
        health_region="us-east-2",
        do_not_send=True,
        profile="prod",
        slack_emoji=":rotating_light:",
        ssm_webhook_parameter="/slack/webhook",
    )


def test_region_falls_back_to_lambda_region():
    config = NotifierConfig.from_env(
        {"SLACK_CHANNEL": "#c", "AWS_REGION": "eu-west-1", "DO_NOT_SEND_MESSAGE": "1"}
    )

    assert config.region == "eu-west-1"


def test_slack_channel_is_required():
    with pytest.raises(ConfigurationError, match="SLACK_CHANNEL"):
        NotifierConfig.from_env({"SSM_SLACK_WEBHOOK_URL": "/slack/webhook"})


def test_webhook_parameter_required_when_sending():
    with pytest.raises(ConfigurationError, match="SSM_SLACK_WEBHOOK_URL"):
        NotifierConfig.from_env({"SLACK_CHANNEL": "#c"})

    config = NotifierConfig.from_env(
        {"SLACK_CHANNEL": "#c", "DO_NOT_SEND_MESSAGE": "yes"}
    )
    assert config.ssm_webhook_parameter is None


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("1", True), ("ON", True), ("false", False), ("", False), (None, False)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected
