from wsgiref.simple_server import WSGIRequestHandler
from nsgc.util.logger import log

class QuietHandler(WSGIRequestHandler):
    """Sends wsgiref's per-request access lines to the debug log instead of stderr."""

    def log_message(self, format, *args):
        log(f"{self.address_string()} {format % args}", "DEBUG")
