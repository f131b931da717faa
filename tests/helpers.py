from health_event_notifier.errors import DeliveryError

EVENT_ARN = (
    "arn:aws:health:eu-west-2::event/EC2/AWS_EC2_INSTANCE_RETIREMENT/"
    "AWS_EC2_INSTANCE_RETIREMENT_abc123"
)
WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


def add_entities(health_client, entities, event_arn=EVENT_ARN):
    health_client.stubber.add_response(
        "describe_affected_entities",
        {"entities": entities},
        {"filter": {"eventArns": [event_arn]}},
    )


class RecordingSender:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def __call__(self, url, payload):
        self.calls.append((url, payload))
        if self.fail:
            raise DeliveryError("Request failed: 500 Internal Server Error")
