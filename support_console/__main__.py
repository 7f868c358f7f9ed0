"""Run the seeded support session on an asyncio event loop."""

import asyncio

from support_console.config import Settings
from support_console.scheduler.timers import AsyncioReplyTimer
from support_console.session.console import ConsoleSession
from support_console.utils.logger import get_logger, setup_logging


async def run_demo(settings: Settings) -> ConsoleSession:
    timer = AsyncioReplyTimer()
    session = ConsoleSession(config=settings.to_console_config(), timer=timer)

    session.auto_draft()
    session.send()
    await timer.drain()
    return session


def main() -> None:
    settings = Settings()
    setup_logging(settings.log_level, settings.log_json)
    logger = get_logger("support_console")

    session = asyncio.run(run_demo(settings))
    for message in session.messages:
        logger.info(
            "transcript",
            author=message.author.value,
            timestamp=message.timestamp,
            topic=message.topic,
            body=message.body,
        )


if __name__ == "__main__":
    main()
