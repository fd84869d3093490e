import logging

import uvicorn

from beercount.core.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(
        "beercount.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
