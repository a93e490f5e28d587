"""
Food Review - Web Server Entry Point
====================================

Run this to start the review server:
    python main.py

Then open http://127.0.0.1:8080/reviews in your browser.

To seed the databases from CSV/Excel files:
    python import_data.py --keywords dictionary.csv --reviews reviews.csv
"""

import uvicorn

from food_review.infrastructure.config import get_settings


def main():
    """Start the web server."""
    settings = get_settings()
    server = settings.server

    print("\n" + "=" * 50)
    print("   Food Review - Review Server")
    print("=" * 50)
    print(f"\n   Starting server at http://{server.host}:{server.port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "food_review.web.app:app",
        host=server.host,
        port=server.port,
        reload=server.reload,
        log_level=server.log_level,
    )


if __name__ == "__main__":
    main()
