import os
import signal
import threading
import falcon
from kubernetes import client, config
from wsgiref.simple_server import make_server

from nsgc.util.setup import load_settings
from nsgc.util.logger import log, set_log_level
from nsgc.util.daemon import Daemon
from nsgc.util.errors import KubernetesClientError, NotificationError
from nsgc.util.quiet_handler import QuietHandler

from nsgc.resources.health_resource import HealthResource
from nsgc.resources.metrics_resource import MetricsResource
from nsgc.services.cleanup_service import CleanupService, utcnow
from nsgc.services.deletion_confirmer import DeletionConfirmer
from nsgc.services.metrics_service import MetricsService
from nsgc.services.notification_service import NotificationService
from nsgc.services.release_reaper import ReleaseReaper
from nsgc.services.telegram_service import TelegramService
from nsgc.services.kubernetes_services.helm_service import HelmService
from nsgc.services.kubernetes_services.namespace_service import NamespaceService


class Server:
    def __init__(self, config_path=None):
        log("Starting server....")
        self.settings = load_settings(config_path)
        level = set_log_level(self.settings.log_level)
        log(f"Log level set to {level}", "DEBUG")

        self.policy = self.settings.policy()
        self.stop_event = threading.Event()
        self.threads = []
        self.httpd = None

        # Instantiate core services
        self.init_kubernetes()
        self.helm_service = HelmService(kubeconfig=os.getenv("KUBECONFIG"))
        self.telegram_service = TelegramService(self.settings.telegram)
        self.notification_service = NotificationService(
            sender=self.telegram_service,
            toggles=self.settings.telegram.notifications
        )

        # Instantiate cleanup engine
        release_reaper = ReleaseReaper(
            helm_service=self.helm_service,
            notification_service=self.notification_service,
            uninstall_timeout=self.policy.release_uninstall_timeout
        )
        deletion_confirmer = DeletionConfirmer(
            namespace_service=self.namespace_service,
            timeout=self.policy.namespace_delete_timeout,
            poll_interval=self.policy.namespace_poll_interval,
            stop_event=self.stop_event
        )
        self.cleanup_service = CleanupService(
            namespace_service=self.namespace_service,
            release_reaper=release_reaper,
            deletion_confirmer=deletion_confirmer,
            notification_service=self.notification_service,
            policy=self.policy
        )
        self.daemon = Daemon(self.cleanup_service, self.settings.cleanup_interval, self.stop_event)

        self.metrics_service = MetricsService(
            namespace_service=self.namespace_service,
            settings=self.settings,
            clock=utcnow
        )
        self.app = self.create_app()

    def create_app(self) -> falcon.App:
        app = falcon.App()
        app.add_route('/health', HealthResource())
        app.add_route('/metrics', MetricsResource(self.metrics_service))
        return app

    def init_kubernetes(self):
        self.kube_config = client.Configuration()
        try:
            config.load_incluster_config(client_configuration=self.kube_config)
            log("Using in-cluster Kubernetes configuration", "DEBUG")
        except config.ConfigException:
            try:
                config.load_kube_config(config_file=os.getenv("KUBECONFIG"), client_configuration=self.kube_config)
                log("Using kubeconfig Kubernetes configuration", "DEBUG")
            except (config.ConfigException, OSError) as e:
                raise KubernetesClientError(f"failed to build kubeconfig: {e}") from e

        self.namespace_service = NamespaceService(config=self.kube_config)

    def run(self):
        signal.signal(signal.SIGINT, self.stop)
        signal.signal(signal.SIGTERM, self.stop)

        self.httpd = make_server('', self.settings.port, self.app, handler_class=QuietHandler)
        http_thread = threading.Thread(target=self.httpd.serve_forever, name="http")
        self.threads.append(http_thread)
        log(f"Starting HTTP server on port {self.settings.port}")
        http_thread.start()

        try:
            self.notification_service.send_startup()
        except NotificationError as e:
            log(f"Failed to send startup notification: {e}", "WARNING")

        cleanup_thread = threading.Thread(target=self.daemon.start_cleanup_routine, name="cleanup")
        self.threads.append(cleanup_thread)
        cleanup_thread.start()

        while not self.stop_event.wait(1):
            pass

        log("Shutting down...")
        self.httpd.shutdown()
        self.httpd.server_close()
        # An in-flight cleanup cycle is allowed to finish
        for thread in self.threads:
            thread.join()
        log("Server exited")

    def stop(self, signum=None, frame=None):
        self.stop_event.set()
