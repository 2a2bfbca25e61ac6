from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import auth, conventions, organizer_conventions, series, venues

# Registers every model on Base.metadata
from app.db.base import Base  # noqa: F401

# ⭐ Import logging system
from app.core.logging_config import get_logger

logger = get_logger()

app = FastAPI(
    title="Convention Listing API",
    version="1.0.0",
    description="API for convention series, conventions, venues, hotels and pricing"
)

# ⭐ Request Logging Middleware
@app.middleware("http")
async def log_requests(request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")

    try:
        response = await call_next(request)
        logger.info(f"RESPONSE: {response.status_code} {request.url}")
        return response

    except Exception as e:
        logger.error(f"ERROR: {request.url} -> {str(e)}")
        raise e


# ⭐ CORS (important for frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # Can restrict later for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------- ROUTERS --------
app.include_router(auth.router)
app.include_router(series.router)
app.include_router(organizer_conventions.router)
app.include_router(venues.router)
app.include_router(conventions.router)

@app.get("/", tags=["Root"])
def root():
    return {"message": "Backend running successfully"}
