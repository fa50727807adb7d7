"""Entry: start the kiosk API server."""
import logging
import uvicorn

from songkiosk.config import API_HOST, API_PORT, API_RELOAD

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    # Reload restarts the worker and wipes the in-memory queue; dev only
    uvicorn.run(
        "songkiosk.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD,
    )
