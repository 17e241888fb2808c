"""Allow-list gate for Scriptly handlers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Awaitable, Callable

from telegram import Update
from telegram.ext import ContextTypes

from ..config.settings import settings

logger = logging.getLogger(__name__)

ACCESS_DENIED_TEXT = "🚫 Access denied"

Handler = Callable[..., Awaitable[Any]]


def check_user_access(user_id: int) -> bool:
    """Return ``True`` when ``user_id`` may use the bot.

    With ``ALLOWED_USERS_ONLY`` unset every user is allowed, otherwise only the
    ids listed in ``ALLOWED_USER_IDS``.
    """
    return not settings.allowed_users_only or user_id in settings.allowed_user_ids


async def notify_access_denied(update: Update) -> None:
    """Tell the user they are not allowed, in the place they interacted with."""
    query = update.callback_query
    if query is not None:
        # Button presses get a popup so the chat is not cluttered.
        await query.answer(ACCESS_DENIED_TEXT, show_alert=True)
        return
    if update.effective_message is not None:
        await update.effective_message.reply_text(ACCESS_DENIED_TEXT)


def require_auth(handler: Handler) -> Handler:
    """Run ``handler`` only for users passing :func:`check_user_access`."""

    @wraps(handler)
    async def guarded(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs) -> Any:
        user = update.effective_user
        if user is None:
            logger.warning("%s: update without a user, skipped", handler.__name__)
            return None

        if not check_user_access(user.id):
            logger.info("%s: denied user %d (@%s)", handler.__name__, user.id, user.username or "unknown")
            await notify_access_denied(update)
            return None

        return await handler(update, context, *args, **kwargs)

    return guarded
