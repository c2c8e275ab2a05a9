import datetime
from typing import Dict, List, Optional

from nsgc.dto.namespace import NamespaceDescriptor
from nsgc.dto.release import ReleaseDescriptor
from nsgc.util.errors import (
    NamespaceNotFound, NotificationError, ReleaseUninstallError,
)

NOW = datetime.datetime(2024, 5, 20, 12, 0, tzinfo=datetime.timezone.utc)


def make_namespace(name: str, age_days: float = 10, labels: Optional[Dict[str, str]] = None) -> NamespaceDescriptor:
    return NamespaceDescriptor(
        name=name,
        creation_timestamp=NOW - datetime.timedelta(days=age_days),
        labels=labels or {},
    )


class FakeNamespaceService:
    """In-memory cluster. Deleted namespaces vanish after `visible_polls` lookups."""

    def __init__(self, namespaces: List[NamespaceDescriptor] = None):
        self.namespaces = {ns.name: ns for ns in (namespaces or [])}
        self.list_error: Optional[Exception] = None
        self.delete_errors: Dict[str, Exception] = {}
        self.visible_polls = 0
        self.deleted: List[str] = []
        self.get_calls: List[str] = []
        self._terminating: Dict[str, int] = {}

    def list_namespaces(self) -> List[NamespaceDescriptor]:
        if self.list_error:
            raise self.list_error
        return list(self.namespaces.values())

    def get_namespace(self, name: str) -> NamespaceDescriptor:
        self.get_calls.append(name)
        if name in self._terminating:
            if self._terminating[name] <= 0:
                del self._terminating[name]
                self.namespaces.pop(name, None)
            else:
                self._terminating[name] -= 1
        if name not in self.namespaces:
            raise NamespaceNotFound(f"namespace {name} not found", namespace=name)
        return self.namespaces[name]

    def delete_namespace(self, name: str) -> None:
        if name in self.delete_errors:
            raise self.delete_errors[name]
        self.deleted.append(name)
        self._terminating[name] = self.visible_polls


class FakeHelmService:
    def __init__(self, releases: Dict[str, List[str]] = None):
        self.releases = {
            ns: [ReleaseDescriptor(name=r, namespace=ns, status="deployed", revision=1) for r in names]
            for ns, names in (releases or {}).items()
        }
        self.list_errors: Dict[str, Exception] = {}
        self.failing: set = set()
        self.uninstalled: List[tuple] = []
        self.attempts: List[tuple] = []

    def list_releases(self, namespace: str) -> List[ReleaseDescriptor]:
        if namespace in self.list_errors:
            raise self.list_errors[namespace]
        return list(self.releases.get(namespace, []))

    def uninstall_release(self, release_name: str, namespace: str, timeout: datetime.timedelta) -> None:
        self.attempts.append((namespace, release_name))
        if release_name in self.failing:
            raise ReleaseUninstallError(
                f"failed to uninstall Helm release {release_name}", namespace=namespace, release=release_name
            )
        self.uninstalled.append((namespace, release_name))
        self.releases[namespace] = [r for r in self.releases.get(namespace, []) if r.name != release_name]


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.events: List[tuple] = []
        self.fail = fail

    def _record(self, *event):
        self.events.append(event)
        if self.fail:
            raise NotificationError("telegram API returned status 502")

    def send_startup(self):
        self._record("startup")

    def send_namespace_deleted(self, namespace, age):
        self._record("namespace_deleted", namespace, age)

    def send_release_deleted(self, release_name, namespace):
        self._record("release_deleted", release_name, namespace)

    def send_cleanup_summary(self, total, cleaned, duration, errored=0):
        self._record("cleanup_summary", total, cleaned, errored)

    def send_error(self, message, error):
        self._record("error", message, error)

    def kinds(self) -> List[str]:
        return [event[0] for event in self.events]


class RecordingSender:
    def __init__(self, configured: bool = True, error: Exception = None):
        self.configured = configured
        self.error = error
        self.messages: List[str] = []

    def is_configured(self) -> bool:
        return self.configured

    def send_message(self, text: str) -> None:
        self.messages.append(text)
        if self.error:
            raise self.error
