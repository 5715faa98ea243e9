"""End-to-end workflows built from the service layer."""

from .daily_pipeline import handle_request, persist_events  # noqa: F401

__all__ = ["handle_request", "persist_events"]
