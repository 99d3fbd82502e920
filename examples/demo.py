#!/usr/bin/env python3
import asyncio
import threading

from chirp import Logger
from chirp_colors import colorize

logger = Logger()


async def fetch_profile():
    await asyncio.sleep(1)
    return {"name": "ada"}


async def charge_card():
    await asyncio.sleep(0.5)
    raise ConnectionError("Network timeout")


def query_rows(done):
    threading.Timer(0.75, done, args=(None, {"rows": [1, 2, 3]})).start()


async def main():
    logger.info("Server started").success("Connected to database")
    logger.warning("Cache is cold").error("Retrying in 5s")
    logger.info("Deploy successful", icon="🚀", color="#87CEEB")
    logger.info("Custom ANSI color", color=Logger.Format.MAGENTA)

    with logger.grouped("User Login"):
        logger.info("Checking credentials...")
        with logger.grouped("Two-factor"):
            logger.success("Code accepted")
        logger.success("Access granted")

    logger.group("Promise Operations")
    await logger.promise(
        fetch_profile(),
        loading="Fetching profile...",
        success="Profile loaded",
        loading_icon="🔄",
        success_icon="🎯",
    )
    try:
        await logger.promise(
            charge_card(),
            loading="Processing payment...",
            success="Payment processed",
            error="Payment failed",
            error_icon="🚨",
        )
    except ConnectionError:
        pass
    logger.group_end()

    logger.group("Callback Operations")
    rows = await logger.callback(
        query_rows, loading="Querying database...", success="Query completed"
    )
    logger.info(f"Got {colorize(len(rows['rows']), Logger.Format.BOLD)} rows")
    logger.group_end()

    # Concurrent flows keep their own indentation with scoped views.
    async def job(name):
        scope = logger.scoped().group(name)
        await scope.promise(asyncio.sleep(0.2), loading=f"{name} running")

    await asyncio.gather(job("worker-1"), job("worker-2"))


if __name__ == "__main__":
    asyncio.run(main())
