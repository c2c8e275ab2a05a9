import falcon

from nsgc.services.metrics_service import MetricsService
from nsgc.util.logger import log

class MetricsResource:
    def __init__(self, metrics_service: MetricsService):
        self.metrics_service = metrics_service

    def on_get(self, req, resp):
        log("GET /metrics request", "DEBUG")
        try:
            snapshot = self.metrics_service.snapshot()
            resp.status = falcon.HTTP_200
            resp.media = snapshot
        except Exception as e:
            self.handle_error(resp, falcon.HTTP_500, "Failed to get metrics", e)

    def handle_error(self, resp, status, error_message, log_message=None):
        if log_message:
            log(f"Error: {log_message}", "ERROR")
        else:
            log(f"Error: {error_message}", "ERROR")
        resp.status = status
        resp.media = {"error": error_message}
