#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Connects to MongoDB, seeds sample users outside production, then serves
# the API with uvicorn.
#
# Usage:
#   python scripts/start_server.py
#
#   # Production: no sample users, custom port
#   NODE_ENV=production PORT=8080 python scripts/start_server.py
#
# Prerequisites:
#   - MongoDB must be reachable at MONGODB_URI (default mongodb://localhost:27017)
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.bootstrap import main


if __name__ == "__main__":
    main()
