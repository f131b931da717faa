import logging
from dataclasses import dataclass

from botocore.exceptions import BotoCoreError, ClientError

from health_event_notifier.errors import EmptyEnrichmentResult, EnrichmentError

logger = logging.getLogger(__name__)

PLACEHOLDER = "N/A"


@dataclass(frozen=True)
class AffectedEntity:
    account_id: str = PLACEHOLDER
    entity_value: str = PLACEHOLDER


def _or_placeholder(value):
    return value if value else PLACEHOLDER


def first_entity(entities):
    # Only the first match is reported, even when several resources are affected.
    if not entities:
        raise EmptyEnrichmentResult("no affected entities returned")
    entity = entities[0]
    return AffectedEntity(
        account_id=_or_placeholder(entity.get("awsAccountId")),
        entity_value=_or_placeholder(entity.get("entityValue")),
    )


def describe_affected_entity(health_client, event_arn) -> AffectedEntity:
    """Look up the account and resource affected by a Health event.

    Query failures raise EnrichmentError. An empty result is not an error:
    both fields fall back to the placeholder.
    """
    try:
        response = health_client.describe_affected_entities(
            filter={"eventArns": [event_arn]}
        )
    except (ClientError, BotoCoreError) as e:
        raise EnrichmentError(
            f"DescribeAffectedEntities failed for {event_arn}: {e}"
        ) from e

    try:
        entity = first_entity(response.get("entities", []))
    except EmptyEnrichmentResult:
        logger.warning("No affected entities found for %s", event_arn)
        entity = AffectedEntity()

    logger.info("AWS Account ID: %s", entity.account_id)
    logger.info("Entity Value: %s", entity.entity_value)
    return entity
