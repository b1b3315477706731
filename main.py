import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import HTTPException as FastAPIHTTPException
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
from dotenv import load_dotenv
import uvicorn

from database import get_session, check_connection
from logging_config import setup_logging
from routers import api_routers

# Load .env
load_dotenv()
setup_logging()

logger = logging.getLogger(__name__)

# App instance
app = FastAPI(title="Property Manager API")

# CORS
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in api_routers:
    app.include_router(router)


@app.get("/api/health")
def health(db: Session = Depends(get_session)):
    return {"status": "ok", "database": check_connection(db.get_bind())}


# 404 fallback for unknown routes; HTTPExceptions raised by handlers keep their detail
@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and not isinstance(exc, FastAPIHTTPException):
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return await http_exception_handler(request, exc)


@app.middleware("http")
async def internal_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
    port = int(os.getenv("PORT", 10000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
