"""
This file is used to create a FastAPI application that will be served by a ASGI server
"""
import sys
import uvicorn

from extraction_service.app import create_app
from extraction_service.settings import settings

sys.path.append("..")

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, reload=False)
