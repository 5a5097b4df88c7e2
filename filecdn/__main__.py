import uvicorn

from filecdn.config import get_settings

settings = get_settings()
uvicorn.run("filecdn.main:app", host=settings.host, port=settings.port)
