# Load environment variables from .env file first, before any other imports
from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from ranking_service.api.routes import recommendations
from ranking_service.config.settings import API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(title="Video Ranking Service", version="1.0.0")

app.include_router(recommendations.router, prefix="/recommendations", tags=["recommendations"])


@app.get("/health")
def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
