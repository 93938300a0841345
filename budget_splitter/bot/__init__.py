"""Telegram transport for the budget assistant."""

from .telegram_bot import router, run_bot

__all__ = ["router", "run_bot"]
