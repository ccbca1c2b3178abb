import logging
import socket
import sys

from werkzeug.serving import make_server

from .config import Settings
from .logging_setup import setup_logging
from .todo import create_app

logger = logging.getLogger(__name__)


def bind_socket(host, port) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return socket.create_server((host, port), family=family)


def serve(app, host, port):
    """Serve ``app`` with one thread per request until interrupted."""
    sock = bind_socket(host, port)
    try:
        server = make_server(host, port, app, threaded=True, fd=sock.fileno())
        logger.info("serving on %s:%d", host, port)
        server.serve_forever()
    finally:
        sock.close()


def main() -> int:
    settings = Settings()
    setup_logging(settings.log_level)

    app = create_app(settings=settings)
    try:
        serve(app, settings.host, settings.port)
    except OSError as exc:
        print(f"error starting server: {exc}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
