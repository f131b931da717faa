"""Forward AWS Health events to Slack, enriched with affected-entity details."""

__version__ = "0.1.0"
