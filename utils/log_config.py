import logging

from context import request_context

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(request)s%(message)s"


class RequestFilter(logging.Filter):
    """Prefix records emitted while serving a request with its method and path"""

    def filter(self, record: logging.LogRecord) -> bool:
        request = request_context.get()
        record.request = f"{request.method} {request.url.path} | " if request is not None else ""
        return True


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()

    # create_app may run more than once per process (tests)
    for handler in list(root.handlers):
        if getattr(handler, "_social_graph", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestFilter())
    handler._social_graph = True
    root.addHandler(handler)
    root.setLevel(level.upper())
