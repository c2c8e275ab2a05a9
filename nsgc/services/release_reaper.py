import datetime

from nsgc.dto.cleanup import ReapResult
from nsgc.services.protocol.kubernetes_services.helm_service_protocol import HelmServiceProtocol
from nsgc.services.protocol.notification_service_protocol import NotificationServiceProtocol
from nsgc.util.errors import NotificationError, ReleaseUninstallError
from nsgc.util.logger import log

class ReleaseReaper:
    def __init__(
            self,
            helm_service: HelmServiceProtocol,
            notification_service: NotificationServiceProtocol,
            uninstall_timeout: datetime.timedelta
        ):
        self.helm_service = helm_service
        self.notification_service = notification_service
        self.uninstall_timeout = uninstall_timeout

    def reap(self, namespace: str) -> ReapResult:
        """Uninstall every Helm release in the namespace, one at a time.

        A failing release is recorded and the next one is still attempted.
        ReleaseListError from the listing propagates untouched: nothing in the
        namespace has been changed at that point.
        """
        log(f"Cleaning up Helm releases in namespace: {namespace}", "DEBUG")
        releases = self.helm_service.list_releases(namespace)
        result = ReapResult()

        for release in releases:
            result.attempted += 1
            log(f"Uninstalling Helm release: {release.name} in namespace: {namespace}", "DEBUG")
            try:
                self.helm_service.uninstall_release(release.name, namespace, self.uninstall_timeout)
            except ReleaseUninstallError as e:
                log(f"Failed to uninstall Helm release {release.name}: {e}", "ERROR")
                result.failures.append(e)
                continue

            log(f"Successfully uninstalled Helm release: {release.name}")
            try:
                self.notification_service.send_release_deleted(release.name, namespace)
            except NotificationError as e:
                log(f"Failed to send Helm release deletion notification: {e}", "WARNING")

        return result
