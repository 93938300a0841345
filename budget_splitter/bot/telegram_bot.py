"""
Telegram bot for the Budget Splitter Assistant.

Long-polling aiogram 3.x process with Dispatcher + Router. Message
handling is delegated to BudgetAssistant; this module only owns the
transport, the /start and /feedback commands, and reply rendering.
"""

import logging

from aiogram import Bot, Dispatcher, F, Router
from aiogram.exceptions import TelegramAPIError
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from ..assistant import BudgetAssistant
from ..core.config import BotConfig
from ..output.formatters import (
    FEEDBACK_EMPTY_MESSAGE,
    FEEDBACK_SENT_MESSAGE,
    START_MESSAGE,
    format_feedback,
    format_reply,
)
from ..storage.category_store import CategoryStore

logger = logging.getLogger(__name__)

router = Router()


def describe_user(message: Message) -> str:
    user = message.from_user
    if user is None:
        return f"chat {message.chat.id}"
    return f"{user.username} (ID: {user.id})"


# --- Commands ---

@router.message(Command("start"))
async def cmd_start(message: Message):
    await message.answer(START_MESSAGE)
    logger.info("Sent start message to user %s", describe_user(message))


@router.message(Command("feedback"))
async def cmd_feedback(message: Message, command: CommandObject, bot: Bot, config: BotConfig):
    feedback_text = (command.args or "").strip()
    if not feedback_text:
        await message.answer(FEEDBACK_EMPTY_MESSAGE)
        logger.info("Feedback command without text from user %s", describe_user(message))
        return

    user = message.from_user
    relay = format_feedback(
        user.username if user else None,
        user.id if user else message.chat.id,
        feedback_text,
    )
    try:
        await bot.send_message(config.admin_telegram_id, relay)
        logger.info("Forwarded feedback from user %s to admin", describe_user(message))
    except TelegramAPIError as e:
        logger.error("Error sending feedback to admin: %s", e)

    await message.answer(FEEDBACK_SENT_MESSAGE)


# --- Messages ---

@router.message(F.text)
async def handle_text(message: Message, assistant: BudgetAssistant):
    if message.from_user is None:
        return
    logger.info("Received message from %s: %s", describe_user(message), message.text)

    reply = assistant.process(message.from_user.id, message.text)
    await message.answer(format_reply(reply))


async def run_bot(config: BotConfig, store: CategoryStore | None = None):
    """Load the store and poll Telegram until cancelled."""
    if store is None:
        store = CategoryStore(config.cache_file)
        store.load()

    bot = Bot(token=config.telegram_bot_token)
    dp = Dispatcher(assistant=BudgetAssistant(store), config=config)
    dp.include_router(router)

    try:
        me = await bot.get_me()
        logger.info("Authorized on account %s", me.username)
        logger.info("Telegram bot starting (polling)...")
        await dp.start_polling(bot)
    finally:
        await bot.session.close()
