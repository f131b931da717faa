#!/usr/bin/env python3
"""Run the AWS Health notifier once against an event read from a file."""

import argparse
import json
import logging
import os
import sys

from health_event_notifier.config import (
    DEFAULT_HEALTH_REGION,
    DEFAULT_SLACK_EMOJI,
    NotifierConfig,
    parse_bool,
)
from health_event_notifier.errors import ConfigurationError
from health_event_notifier.handler import build_context
from health_event_notifier.pipeline import NotificationPipeline


def parse_args(argv=None, environ=None):
    environ = os.environ if environ is None else environ

    parser = argparse.ArgumentParser(
        description="Send an AWS Health event notification to Slack"
    )
    parser.add_argument(
        "--region",
        default=environ.get("REGION") or environ.get("AWS_REGION"),
        help="The AWS region to use",
    )
    parser.add_argument(
        "--aws-health-region",
        default=environ.get("AWS_HEALTH_REGION", DEFAULT_HEALTH_REGION),
        help="The AWS Health API region to use",
    )
    parser.add_argument(
        "-s",
        "--do-not-send-message",
        action="store_true",
        default=parse_bool(environ.get("DO_NOT_SEND_MESSAGE")),
        help="Do not send the message to Slack",
    )
    parser.add_argument(
        "-p",
        "--profile",
        default=environ.get("AWS_PROFILE"),
        help="The AWS profile to use",
    )
    parser.add_argument(
        "--slack-channel",
        default=environ.get("SLACK_CHANNEL"),
        help="The Slack channel",
    )
    parser.add_argument(
        "--slack-emoji",
        default=environ.get("SLACK_EMOJI", DEFAULT_SLACK_EMOJI),
        help="The Slack emoji associated with the notifications",
    )
    parser.add_argument(
        "--ssm-slack-webhook-url",
        default=environ.get("SSM_SLACK_WEBHOOK_URL"),
        help="The name of the Slack webhook URL in Parameter Store",
    )
    parser.add_argument(
        "--event",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="File holding one EventBridge event (default: stdin)",
    )
    return parser.parse_args(argv)


def config_from_args(args):
    return NotifierConfig(
        slack_channel=args.slack_channel or "",
        region=args.region,
        health_region=args.aws_health_region,
        do_not_send=args.do_not_send_message,
        profile=args.profile,
        slack_emoji=args.slack_emoji,
        ssm_webhook_parameter=args.ssm_slack_webhook_url,
    )


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    args = parse_args(argv)

    try:
        config = config_from_args(args)
        context = build_context(config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    with args.event:
        try:
            event = json.load(args.event)
        except ValueError as e:
            event = None
            logging.getLogger(__name__).error("Event file is not valid JSON: %s", e)

    outcome = NotificationPipeline(context).run(event)
    print(outcome.value)
    if outcome.aborted:
        sys.exit(1)


if __name__ == "__main__":
    main()
