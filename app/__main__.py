# =============================================================================
# app/__main__.py - `python -m app` entry point
# =============================================================================

from app.bootstrap import main

main()
