#!/usr/bin/env python3
"""
Entry point for running the Budget Tracker API server.

Usage:
    python run.py [--port PORT] [--host HOST] [--storage memory|database]
"""

import argparse
import logging
import os
import webbrowser
import qrcode
import uvicorn


def print_qr_code(url: str) -> None:
    """Print a QR code to the terminal."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(url)
    qr.make(fit=True)

    # Print QR code using ASCII
    qr.print_ascii(invert=True)


def main():
    parser = argparse.ArgumentParser(description="Budget Tracker API")
    parser.add_argument("--port", type=int, default=8000, help="Port to run on")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--no-browser", action="store_true", help="Don't open the API docs")
    parser.add_argument("--storage", choices=["memory", "database"], help="Storage backend")
    parser.add_argument("--database-url", help="SQLAlchemy URL for the database backend")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    # The app reads its settings from the environment when it is imported
    if args.storage:
        os.environ["BUDGET_STORAGE"] = args.storage
    if args.database_url:
        os.environ["BUDGET_DATABASE_URL"] = args.database_url

    from budget_tracker.config import load_settings
    settings = load_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  Budget Tracker")
    print("=" * 50)
    print(f"\n  URL: {url}")
    print(f"  Storage: {settings.storage}\n")

    try:
        print_qr_code(url)
    except Exception:
        pass  # QR code is optional

    print("\n  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    if not args.no_browser:
        webbrowser.open(f"{url}/docs")

    uvicorn.run(
        "budget_tracker.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
