"""Application factory that wires handlers into python-telegram-bot."""

from __future__ import annotations

import logging

from telegram import Update
from telegram.ext import (
    Application,
    ApplicationBuilder,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from ..config.settings import settings
from .handlers import (
    chart_handler,
    document_handler,
    help_handler,
    selection_callback_handler,
    start_handler,
    text_handler,
    translate_pair_handler,
)

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_application() -> Application:
    application = (
        ApplicationBuilder()
        .token(settings.require_telegram_token())
        .build()
    )
    application.add_handler(CommandHandler("start", start_handler))
    application.add_handler(CommandHandler("help", help_handler))
    application.add_handler(CommandHandler("chart", chart_handler))
    application.add_handler(CommandHandler("translate", translate_pair_handler))
    application.add_handler(CallbackQueryHandler(selection_callback_handler, pattern=r"^(conv|tr):"))
    application.add_handler(MessageHandler(filters.Document.FileExtension("docx"), document_handler))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, text_handler))
    application.add_error_handler(_error_handler)
    return application


async def _error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logger.exception("Unhandled exception", exc_info=context.error)
    if isinstance(update, Update) and update.effective_message:
        await update.effective_message.reply_text("Something went wrong. Please try again later.")


def main() -> None:
    _configure_logging()
    application = build_application()
    logger.info("Starting bot")
    application.run_polling(allowed_updates=None)


if __name__ == "__main__":
    main()
