import datetime
import time
from typing import Callable, Optional

from nsgc.dto.cleanup import CleanupCycleResult, CleanupPolicy
from nsgc.dto.namespace import NamespaceDescriptor
from nsgc.services.deletion_confirmer import DeletionConfirmer
from nsgc.services.namespace_filter import skip_reason
from nsgc.services.protocol.kubernetes_services.namespace_service_protocol import NamespaceServiceProtocol
from nsgc.services.protocol.notification_service_protocol import NotificationServiceProtocol
from nsgc.services.release_reaper import ReleaseReaper
from nsgc.util.duration import format_duration
from nsgc.util.errors import NamespaceGCError, NamespaceListError, NotificationError, ReleaseCleanupError
from nsgc.util.logger import log

def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)

class CleanupService:
    """Runs one cleanup cycle over every namespace in the cluster.

    Namespaces are handled one after another. Whatever goes wrong for one
    namespace is logged, reported and counted, and the next namespace is
    processed as if nothing happened.
    """

    def __init__(
            self,
            namespace_service: NamespaceServiceProtocol,
            release_reaper: ReleaseReaper,
            deletion_confirmer: DeletionConfirmer,
            notification_service: NotificationServiceProtocol,
            policy: CleanupPolicy,
            clock: Callable[[], datetime.datetime] = utcnow
        ):
        self.namespace_service = namespace_service
        self.release_reaper = release_reaper
        self.deletion_confirmer = deletion_confirmer
        self.notification_service = notification_service
        self.policy = policy
        self.clock = clock

    def run_cycle(self) -> Optional[CleanupCycleResult]:
        """Returns the cycle summary, or None when the namespace listing failed."""
        started = time.monotonic()
        log("Starting namespace cleanup")

        try:
            namespaces = self.namespace_service.list_namespaces()
        except NamespaceListError as e:
            log(f"Failed to list namespaces: {e}", "ERROR")
            self._notify(self.notification_service.send_error, "Failed to list namespaces", e)
            return None

        now = self.clock()
        log(f"Found {len(namespaces)} namespaces, cutoff is {self.policy.cutoff(now).isoformat()}", "DEBUG")
        cleaned = 0
        errored = 0

        for namespace in namespaces:
            reason = skip_reason(namespace, self.policy, now)
            if reason is not None:
                log(f"Skipping namespace {namespace.name}: {reason}", "DEBUG")
                continue

            if self._cleanup_namespace(namespace, now):
                cleaned += 1
            else:
                errored += 1

        result = CleanupCycleResult(
            total=len(namespaces),
            cleaned=cleaned,
            errored=errored,
            duration=datetime.timedelta(seconds=time.monotonic() - started),
        )
        log(f"Cleanup completed. Cleaned {cleaned} namespaces, {errored} failed")
        self._notify(self.notification_service.send_cleanup_summary,
                     result.total, result.cleaned, result.duration, result.errored)
        return result

    def _cleanup_namespace(self, namespace: NamespaceDescriptor, now: datetime.datetime) -> bool:
        name = namespace.name
        log(f"Cleaning up namespace {name} (age {format_duration(namespace.age(now))})")

        # Collaborator bugs are contained here too, never crossing into the next namespace.
        try:
            reaped = self.release_reaper.reap(name)
            if not reaped.ok:
                raise ReleaseCleanupError(name, reaped.failures)
        except Exception as e:
            log(f"Failed to cleanup Helm releases in namespace {name}: {_describe(e)}", "ERROR")
            self._notify(self.notification_service.send_error,
                         f"Failed to cleanup Helm releases in namespace {name}", e)
            return False

        try:
            self.deletion_confirmer.delete_and_confirm(name)
        except Exception as e:
            log(f"Failed to delete namespace {name}: {_describe(e)}", "ERROR")
            self._notify(self.notification_service.send_error, f"Failed to delete namespace {name}", e)
            return False

        self._notify(self.notification_service.send_namespace_deleted, name, namespace.age(self.clock()))
        log(f"Successfully cleaned up namespace: {name}")
        return True

    def _notify(self, send, *args) -> None:
        try:
            send(*args)
        except NotificationError as e:
            log(f"Failed to send notification: {e}", "WARNING")

def _describe(e: Exception) -> str:
    if isinstance(e, NamespaceGCError):
        return str(e)
    return f"unexpected {type(e).__name__}: {e}"
