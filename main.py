"""
main.py: server launcher and entry point.

Run this file to start the dashboard API:

    python main.py

The Streamlit front end is started separately and reads from this server:

    streamlit run dashboard/app.py

This file does NOT contain application logic. See app.py for the FastAPI
application and service wiring.
"""

from __future__ import annotations

import uvicorn


HOST = "127.0.0.1"
PORT = 8000


def main() -> None:
    """Start the dashboard API server."""
    print("=" * 60)
    print("  Hotel Operations Dashboard API")
    print("=" * 60)
    print(f"  View model: http://{HOST}:{PORT}/view_model")
    print(f"  API docs  : http://{HOST}:{PORT}/docs")
    print("=" * 60)
    print("  Press CTRL+C to stop\n")

    uvicorn.run(
        "app:app",
        host=HOST,
        port=PORT,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
