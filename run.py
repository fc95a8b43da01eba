#!/usr/bin/env python3
"""Run script for postplanner."""

import uvicorn

from postplanner.config import DEBUG

if __name__ == "__main__":
    uvicorn.run(
        "postplanner.api.app:app",
        host="0.0.0.0",
        port=8000,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info",
    )
