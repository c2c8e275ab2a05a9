import datetime
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, FrozenSet, List, Optional

from nsgc.util.duration import format_duration
from nsgc.util.errors import ReleaseUninstallError

@dataclass(frozen=True)
class CleanupPolicy:
    max_age:                   datetime.timedelta
    excluded_namespaces:       FrozenSet[str]       = frozenset()
    ignore_label:              Optional[str]        = None
    release_uninstall_timeout: datetime.timedelta   = datetime.timedelta(minutes=5)
    namespace_delete_timeout:  datetime.timedelta   = datetime.timedelta(minutes=5)
    namespace_poll_interval:   datetime.timedelta   = datetime.timedelta(seconds=10)

    def cutoff(self, now: datetime.datetime) -> datetime.datetime:
        return now - self.max_age

@dataclass
class ReapResult:
    attempted: int                          = 0
    failures:  List[ReleaseUninstallError]  = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

@dataclass(frozen=True)
class CleanupCycleResult:
    total:    int
    cleaned:  int
    errored:  int
    duration: datetime.timedelta

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict (e.g. for JSON)."""
        data = asdict(self)
        data["duration"] = format_duration(self.duration)
        return data
