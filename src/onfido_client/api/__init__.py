"""FastAPI integration for receiving webhook notifications."""

from .dependencies import verified_webhook_dependency

__all__ = ["verified_webhook_dependency"]
