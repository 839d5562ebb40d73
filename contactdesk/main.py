import uvicorn as uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
import logging

from contactdesk.config.settings import settings
from contactdesk.config.database import closeDB
from contactdesk.commonUtils.exceptions import ContactDeskError, ValidationError
from contactdesk.routes import contactFormRoute, pagesRoute

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The database handle is created lazily by the first request that needs it,
    # so the app still starts (and answers 500s) while MongoDB is down.
    logger.info(f"Starting contact desk ({settings.ENVIRONMENT})")

    yield

    closeDB()


app = FastAPI(
    lifespan=lifespan,
    docs_url=None if settings.ENVIRONMENT.lower() == "production" else "/docs",
    redoc_url=None if settings.ENVIRONMENT.lower() == "production" else "/redoc"
)


async def contact_desk_exception_handler(request: Request, exc: ContactDeskError):
    """Turn workflow errors into the {message, details} responses the form client expects"""
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.public_message, "missingFields": exc.missing_fields}
        )

    logger.error(f"{exc.kind} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.public_message, "details": exc.message}
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid form data", "details": details}
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Last resort for anything unexpected; internals stay in the log"""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "details": "Please contact support"}
    )


app.add_exception_handler(ContactDeskError, contact_desk_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contactFormRoute.router, tags=['contact'], prefix='/api')
app.include_router(pagesRoute.router, tags=['pages'])


@app.get("/api/healthchecker")
def root():
    return {"message": "Welcome to Contact Desk"}


if __name__ == "__main__":
    uvicorn.run("contactdesk.main:app", host="0.0.0.0", port=5001, reload=True, log_level="info")
