from __future__ import annotations

import logging

import uvicorn

from core.settings import SERVER_HOST, SERVER_PORT


logger = logging.getLogger("api")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Server running at http://localhost:%d", SERVER_PORT)
    uvicorn.run("api.main:app", host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    main()
