from dataclasses import dataclass
from typing import Any, Dict

@dataclass(frozen=True)
class ReleaseDescriptor:
    name:      str
    namespace: str
    status:    str
    revision:  int

    @classmethod
    def from_helm(cls, item: Dict[str, Any]) -> "ReleaseDescriptor":
        """Build from one entry of `helm list -o json` (revision is a string there)."""
        return cls(
            name=item["name"],
            namespace=item.get("namespace", ""),
            status=item.get("status", "unknown"),
            revision=int(item.get("revision") or 0),
        )
