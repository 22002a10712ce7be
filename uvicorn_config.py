import uvicorn

from settings.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "settings.server:org_chart_app",
        host=settings.api_host,
        port=settings.api_port,
        timeout_keep_alive=60,
        reload=False
    )
