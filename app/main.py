# app/main.py
import uvicorn

from app.api import create_app
from app.utils.settings import HOST, PORT, LOG_LEVEL
from app.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info(f"Starting Product Service on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
