"""Settings, feature and campaign models, settings validation, flag results, stored decisions, request parameters and event payloads."""

__version__ = "1.3.0"