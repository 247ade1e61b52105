import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from wardrobe_recs.core.config import settings
from wardrobe_recs.routers import health, recommendations, weather
from wardrobe_recs.routers import taxonomy as taxonomy_router

logging.basicConfig(level=settings.LOG_LEVEL.upper())

app = FastAPI(title=settings.APP_NAME)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins if origins != ["*"] else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

prefix = settings.API_PREFIX
app.include_router(health.router, prefix=prefix)
app.include_router(taxonomy_router.router, prefix=prefix)
app.include_router(weather.router, prefix=prefix)
app.include_router(recommendations.router, prefix=prefix)

logger = logging.getLogger("wardrobe_recs.requests")

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
