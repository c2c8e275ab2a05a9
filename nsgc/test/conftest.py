import datetime
import pytest

from nsgc.dto.cleanup import CleanupPolicy
from nsgc.test.fakes import RecordingNotifier


@pytest.fixture
def policy() -> CleanupPolicy:
    return CleanupPolicy(
        max_age=datetime.timedelta(days=7),
        excluded_namespaces=frozenset(["kube-system", "kube-public", "kube-node-lease", "default"]),
        ignore_label="kube-ns-gc.ignore",
        release_uninstall_timeout=datetime.timedelta(minutes=5),
        namespace_delete_timeout=datetime.timedelta(seconds=0.5),
        namespace_poll_interval=datetime.timedelta(seconds=0.01),
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
