import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from filecdn.config import configure_logging, get_settings
from filecdn.database import catalog
from filecdn.errors import FileHostError, Unauthorized
from filecdn.routers import auth, file, public

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    catalog.create_tables()
    logger.info("Catalog ready at %s, storing files in %s", catalog.url, get_settings().storage_dir)
    yield
    catalog.dispose()


app = FastAPI(title="filecdn", version="0.1.0", lifespan=lifespan)

app.include_router(auth.router, tags=["Auth"])
app.include_router(file.router, tags=["Files"])
app.include_router(public.router, prefix=get_settings().public_url_prefix.rstrip("/"), tags=["Public"])


@app.exception_handler(FileHostError)
async def file_host_error_handler(request: Request, error: FileHostError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(error, Unauthorized) else None
    return JSONResponse(status_code=error.status_code, content={"detail": error.message}, headers=headers)


@app.get("/")
def read_root():
    return "Server is running"
