import uvicorn

from core.config import API_HOST, API_PORT, configure_logging
from web.api import app

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "web.api:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )
