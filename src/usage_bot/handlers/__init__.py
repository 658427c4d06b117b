from aiogram import Router
from usage_bot.handlers.start import router as start_router
from usage_bot.handlers.usage import router as usage_router

router = Router()

router.include_routers(
    start_router,
    usage_router,
)
