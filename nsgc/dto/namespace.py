import datetime
from dataclasses import dataclass, field
from typing import Dict, Optional
from kubernetes import client

@dataclass(frozen=True)
class NamespaceDescriptor:
    name:               str
    creation_timestamp: Optional[datetime.datetime]
    labels:             Dict[str, str]  = field(default_factory=dict)

    def age(self, now: datetime.datetime) -> datetime.timedelta:
        return now - self.creation_timestamp

    @classmethod
    def from_v1(cls, namespace: client.V1Namespace) -> "NamespaceDescriptor":
        metadata = namespace.metadata
        created = metadata.creation_timestamp
        if created is not None and created.tzinfo is None:
            created = created.replace(tzinfo=datetime.timezone.utc)
        return cls(
            name=metadata.name,
            creation_timestamp=created,
            labels=dict(metadata.labels or {}),
        )
