# Food Review - Dictionary-Gated Review Service
# ==============================================
# Serves restaurant reviews over HTTP using a Layered Architecture:
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI routes and HTML renderer (web/)
# - Application:    Use cases and validation ordering (application/)
# - Domain:         Review model and error taxonomy (domain/)
# - Infrastructure: SQLite stores, settings, table import (infrastructure/)
#
# Stores are consumed through abstract interfaces, so another backing
# engine (or a test double) can replace SQLite without touching the
# application or web layers.

__version__ = "1.0.0"
