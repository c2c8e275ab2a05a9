import datetime
from typing import Protocol, List
from nsgc.dto.release import ReleaseDescriptor

class HelmServiceProtocol(Protocol):
    def list_releases(self, namespace: str) -> List[ReleaseDescriptor]:
        ...

    def uninstall_release(self, release_name: str, namespace: str, timeout: datetime.timedelta) -> None:
        ...
