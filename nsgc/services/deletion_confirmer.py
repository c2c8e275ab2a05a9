import datetime
import threading
import time
from typing import Optional

from nsgc.services.protocol.kubernetes_services.namespace_service_protocol import NamespaceServiceProtocol
from nsgc.util.duration import format_duration
from nsgc.util.errors import NamespaceDeletionError, NamespaceDeletionTimeout, NamespaceLookupError, NamespaceNotFound
from nsgc.util.logger import log

class DeletionConfirmer:
    """Deletes a namespace and waits until the API server no longer returns it.

    Namespace deletion is asynchronous: the delete call only marks the
    namespace Terminating. The wait polls every poll_interval, treats lookup
    errors other than 404 as transient, and gives up after timeout. Setting
    stop_event ends the wait early.
    """

    def __init__(
            self,
            namespace_service: NamespaceServiceProtocol,
            timeout: datetime.timedelta,
            poll_interval: datetime.timedelta,
            stop_event: Optional[threading.Event] = None
        ):
        self.namespace_service = namespace_service
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.stop_event = stop_event or threading.Event()

    def delete_and_confirm(self, name: str) -> None:
        log(f"Deleting namespace: {name}", "DEBUG")
        self.namespace_service.delete_namespace(name)

        poll_seconds = self.poll_interval.total_seconds()
        deadline = time.monotonic() + self.timeout.total_seconds()
        polls = 0

        while True:
            remaining = max(0.0, deadline - time.monotonic())
            if self.stop_event.wait(min(poll_seconds, remaining)):
                raise NamespaceDeletionError(
                    f"waiting for deletion of namespace {name} interrupted by shutdown", namespace=name
                )

            polls += 1
            try:
                self.namespace_service.get_namespace(name)
            except NamespaceNotFound:
                log(f"Namespace {name} is gone after {polls} poll(s)", "DEBUG")
                return
            except NamespaceLookupError as e:
                log(f"Transient error while waiting for namespace {name} deletion: {e}", "WARNING")

            if time.monotonic() >= deadline:
                raise NamespaceDeletionTimeout(
                    f"timeout waiting for namespace {name} deletion after {format_duration(self.timeout)}",
                    namespace=name,
                )
