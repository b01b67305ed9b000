import uvicorn

from brandhub.config import AppSettings

if __name__ == "__main__":
    settings = AppSettings()

    # Local console: bind to loopback unless configured otherwise
    print(f"🚀 Starting Brand Hub on http://{settings.host}:{settings.port}")
    uvicorn.run("brandhub.main:app", host=settings.host, port=settings.port, reload=False)
