"""
Bootstrap script — registers a screen from the command line.

Usage:
    uv run python -m daiara.scripts.register_screen [--push-token TOKEN]

Prints the new screen's device code.  Useful for provisioning a
device before it ever talks to the API.
"""

import argparse
import asyncio

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from daiara.core.config import settings
from daiara.services import screen_service


async def register(push_token: str | None) -> None:
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    try:
        async with session_factory() as session:
            screen = await screen_service.register_screen(
                session, push_notification_token=push_token,
            )
            await session.commit()

            print("\n✅  Screen registered")
            print(f"    Device code: {screen.id}")
            print(f"    Registered:  {screen.registered_date:%Y-%m-%d %H:%M:%S} UTC")
            if push_token:
                print("    Push token:  set")
            print()
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Register a new screen")
    parser.add_argument("--push-token", default=None, help="owner's Expo push token")
    args = parser.parse_args()
    asyncio.run(register(args.push_token))


if __name__ == "__main__":
    main()
