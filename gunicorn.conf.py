import sys

from extraction_service.settings import settings
from extraction_service.utils.utils import setup_logging

sys.path.append(".")

bind = f"{settings.HOST}:{settings.PORT}"
workers = settings.WORKERS
worker_class = "uvicorn.workers.UvicornWorker"
timeout = settings.WORKER_TIMEOUT
loglevel = "debug" if settings.DEBUG_MODE else "info"

log = setup_logging(component_name="gunicorn_conf", log_level=settings.LOG_LEVEL)


def post_fork(server, worker):
    log.info("worker spawned pid=%s bind=%s", worker.pid, bind)


def worker_abort(worker):
    log.error("worker timed out pid=%s, timeout=%ss", worker.pid, timeout)
