from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import os
from dotenv import load_dotenv

import model  # noqa: F401  registers every table on Base
from db.database import Base, engine
from exceptions import AuthenticationError, AuthorizationError, ServiceError, ValidationError

from router.auth_router import router as auth_router
from router.user_router import router as user_router
from router.project_router import router as project_router
from router.timesheet_router import router as timesheet_router

load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Read CORS origins from environment variables
REACT_APP_API_URL = os.getenv("REACT_APP_API_URL", "")
FRONTEND_URL = os.getenv("FRONTEND_URL", "")

# Parse comma-separated origins and create list
allowed_origins = []
for env_var in [REACT_APP_API_URL, FRONTEND_URL]:
    if env_var:
        origins = [origin.strip() for origin in env_var.split(",") if origin.strip()]
        allowed_origins.extend(origins)

# Remove duplicates while preserving order
allowed_origins = list(dict.fromkeys(allowed_origins))

# If no origins configured, allow localhost for development
if not allowed_origins:
    allowed_origins = ["http://localhost:3000", "http://localhost:8000"]

logger.info(f"Allowed CORS origins: {allowed_origins}")


app = FastAPI(
    title="Timesheet API",
    description="API for tracking users, projects and the hours logged against them.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request: Request, exc: AuthorizationError):
    logger.warning(f"Denied {exc.details.get('action')} on {request.url.path}")
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": exc.message})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "errors": exc.details.get("invalid_fields", {})},
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    # Already logged with its cause where it was raised
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": exc.message})


# Routes
@app.get("/")
def read_root():
    return {"message": "Welcome to the Timesheet API!"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(auth_router)
app.include_router(user_router)
app.include_router(project_router)
app.include_router(timesheet_router)
