#!/usr/bin/env python3
"""
Entry point that starts the execution backend (FastAPI)
"""
import sys
from pathlib import Path

# Put the project root on the import path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from infrastructure.config.settings import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=True  # auto reload for development
    )
