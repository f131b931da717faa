# AWS Lambda function to send AWS Health Event alerts to Slack
#
# This function is triggered by EventBridge when AWS Health events occur.
# It looks up the affected account and resource with the AWS Health API,
# reads the Slack webhook URL from SSM Parameter Store at runtime and
# posts a formatted message to Slack.

import json
import logging

from health_event_notifier.aws import (
    get_slack_webhook_url,
    make_client,
    make_session,
)
from health_event_notifier.config import NotifierConfig
from health_event_notifier.notifier import SlackNotifier
from health_event_notifier.pipeline import NotificationPipeline, PipelineContext

logger = logging.getLogger()
logger.setLevel(logging.INFO)

_config_cache = None


def get_config():
    global _config_cache
    if _config_cache is None:
        _config_cache = NotifierConfig.from_env()
    return _config_cache


def build_context(config):
    # The webhook URL is read once per invocation, after the event decodes,
    # so a rotated secret is picked up straight away.
    def fetch_webhook_url():
        session = make_session(config.region, config.profile)
        return get_slack_webhook_url(
            make_client(session, "ssm"), config.ssm_webhook_parameter
        )

    health_session = make_session(config.health_region, config.profile)
    return PipelineContext(
        config=config,
        health_client=make_client(health_session, "health"),
        notifier=SlackNotifier(fetch_webhook_url),
    )


def lambda_handler(event, context):
    logger.info("Event: %s", json.dumps(event, default=str))

    config = get_config()
    outcome = NotificationPipeline(build_context(config)).run(event)
    return {"outcome": outcome.value}
