"""Launch the Colleges API with uvicorn.

Host, port and the dataset location are read from the environment
(``HOST``, ``PORT``, ``DATASET_PATH``); see ``college_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from college_api.app.core.config import settings
from college_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
