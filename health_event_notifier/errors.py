class NotifierError(Exception):
    """Base class for every error raised by the notifier."""


class ConfigurationError(NotifierError):
    """Configuration, credentials or secret lookup failed."""


class DecodeError(NotifierError):
    """The inbound event does not look like an AWS Health event."""


class EnrichmentError(NotifierError):
    """The AWS Health API query failed."""


class EmptyEnrichmentResult(NotifierError):
    """No affected entity matched the event ARN."""


class DeliveryError(NotifierError):
    """Posting the message to the Slack webhook failed."""
