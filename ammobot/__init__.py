"""Building blocks for an MMO bot: HTTP API client, game data managers and character action queues."""

__version__ = "0.1.0"