from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter
from starlette.middleware.cors import CORSMiddleware
import logging

from config import APP_NAME, CORS_ORIGINS, LOG_LEVEL, HOST, PORT
from database import seed_store
from routers import stock_router, reports_router

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    seed_store()
    logger.info(f"{APP_NAME} started")
    yield


# Create the main app
app = FastAPI(title=APP_NAME, version="1.0.0", lifespan=lifespan)

# Create main API router with /api prefix
api_router = APIRouter(prefix="/api")

api_router.include_router(stock_router)
api_router.include_router(reports_router)


# Root endpoint
@api_router.get("/")
async def root():
    return {"message": APP_NAME, "status": "running"}

# Include the main router
app.include_router(api_router)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
