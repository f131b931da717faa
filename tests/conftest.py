import boto3
import pytest
from botocore.stub import Stubber

from health_event_notifier.config import NotifierConfig

from tests.helpers import EVENT_ARN, RecordingSender


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-2")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def health_event():
    return {
        "version": "0",
        "id": "7bf73129-1428-4cd3-a780-95db273d1602",
        "detail-type": "AWS Health Event",
        "source": "aws.health",
        "account": "123456789012",
        "time": "2024-01-10T01:52:00Z",
        "region": "eu-west-2",
        "resources": ["i-0abc"],
        "detail": {
            "eventArn": EVENT_ARN,
            "service": "EC2",
            "eventTypeCode": "AWS_EC2_INSTANCE_RETIREMENT",
            "eventTypeCategory": "scheduledChange",
            "startTime": "Wed, 10 Jan 2024 01:52:00 GMT",
            "eventDescription": [
                {"language": "en_US", "latestDescription": "Instance retiring"}
            ],
        },
    }


@pytest.fixture
def health_client():
    client = boto3.client("health", region_name="us-east-1")
    with Stubber(client) as stubber:
        client.stubber = stubber
        yield client


@pytest.fixture
def ssm_client():
    client = boto3.client("ssm", region_name="eu-west-2")
    with Stubber(client) as stubber:
        client.stubber = stubber
        yield client


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def config():
    return NotifierConfig(
        slack_channel="#aws-health",
        region="eu-west-2",
        ssm_webhook_parameter="/slack/webhook-url",
    )
