from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from infra.database.connection import init_db, close_db
from api.routers import songs
from domain.exceptions import SongCatalogError, StoreError
from utils.logger import get_logger

from config import settings

logger = get_logger(__name__)

# Lifespan event to handle startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    close_db()
    logger.info("Database disconnected")

app = FastAPI(title=f"{settings.APP_NAME} API", version="1.0.0", lifespan=lifespan)

@app.exception_handler(SongCatalogError)
async def catalog_error_handler(request: Request, exc: SongCatalogError):
    if isinstance(exc, StoreError):
        # Details stay in the log
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal Server Error"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

def jsonable_errors(exc: RequestValidationError):
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]

# Malformed bodies and query strings map to 400
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": "Bad Request", "errors": jsonable_errors(exc)})

# Root endpoint for health check
@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API is running"}

# Include Routers
app.include_router(songs.router)
