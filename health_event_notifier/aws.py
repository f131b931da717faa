"""boto3 sessions and the SSM lookup of the Slack webhook URL."""

import boto3
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from health_event_notifier.errors import ConfigurationError


def make_session(region, profile=None):
    try:
        return boto3.session.Session(region_name=region, profile_name=profile)
    except ProfileNotFound as e:
        raise ConfigurationError(f"AWS profile not found: {profile}") from e


def get_slack_webhook_url(ssm_client, parameter_name):
    try:
        response = ssm_client.get_parameter(Name=parameter_name, WithDecryption=True)
    except (ClientError, BotoCoreError) as e:
        raise ConfigurationError(
            f"Failed to decrypt Slack webhook URL from {parameter_name}: {e}"
        ) from e
    return response["Parameter"]["Value"]


def make_client(session, service_name):
    try:
        return session.client(service_name)
    except BotoCoreError as e:
        raise ConfigurationError(f"Unable to create {service_name} client: {e}") from e
