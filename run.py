# run.py - LenderPortal launcher
import logging
import os

from LenderPortal.app import create_app

logger = logging.getLogger("LenderPortal")


def start_server():
    app = create_app()

    port = int(os.environ.get("PORT", 5050))
    logger.info("Starting LenderPortal on port %s", port)

    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    start_server()
