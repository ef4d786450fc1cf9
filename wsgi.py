import re
import sys

import orjson
from a2wsgi import ASGIMiddleware

from extraction_service.app import create_app
from extraction_service.processor.exceptions import PayloadTooLargeError
from extraction_service.settings import settings

sys.path.append("..")

asgi_app = create_app()
asgi_middleware = ASGIMiddleware(asgi_app)  # type: ignore[arg-type]

_BAD_URI = re.compile(r"(%2e%2e|%00|\${jndi:|/winnt/|/etc/passwd)", re.I)


def app(environ, start_response):
    try:
        path = environ.get("PATH_INFO", "")
        if _BAD_URI.search(path):
            start_response("400 Bad Request", [("Content-Type", "text/plain")])
            return [b"Bad Request: blocked"]

        # refuse oversized uploads before a2wsgi buffers them
        content_length = str(environ.get("CONTENT_LENGTH") or "")
        if content_length.isdigit() and int(content_length) > settings.MAX_REQUEST_BODY_SIZE:
            error = PayloadTooLargeError(settings.MAX_REQUEST_BODY_SIZE)
            start_response("413 Payload Too Large", [("Content-Type", "application/json")])
            return [orjson.dumps(error.to_payload())]

        # hand off to ASGI → WSGI bridge
        return asgi_middleware(environ, start_response)

    except UnicodeDecodeError:
        start_response("400 Bad Request", [("Content-Type", "text/plain")])
        return [b"Bad Request: malformed path"]

    except Exception:
        # last-resort catch so one bad request can’t crash workers
        start_response("500 Internal Server Error", [("Content-Type", "application/json")])
        return [orjson.dumps({"error": "File processing failed", "message": "Internal Server Error"})]
