#!/usr/bin/env python3
"""
PodScript Studio server — entrypoint for uvicorn podscript.server:app.

For uvicorn podscript:app use podscript/__init__.py (exposes app from podscript.app).
Run directly with: python -m podscript.server
"""

import uvicorn

from .app import app
from .config import get_config


def main() -> None:
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
