#!/usr/bin/env python3
"""Run the API server."""

import uvicorn

from settings import HOST, LOG_LEVEL, LOG_TO_FILE, PORT
from settings.logging import setup_logging

if __name__ == "__main__":
    setup_logging(LOG_LEVEL, to_file=LOG_TO_FILE)
    uvicorn.run("web.server:create_app", factory=True, host=HOST, port=PORT, log_config=None)
