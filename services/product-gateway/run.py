#!/usr/bin/env python3
"""
Startup script for the product lookup gateway (port 8004 unless GATEWAY_PORT is set).
"""

import uvicorn
import os
import sys

# Add the current directory to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.config import GATEWAY_HOST, GATEWAY_PORT, LOG_LEVEL

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=GATEWAY_HOST,
        port=GATEWAY_PORT,
        reload=True,
        log_level=LOG_LEVEL.lower()
    )
