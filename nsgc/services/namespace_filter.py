"""Decides which namespaces are old enough to be garbage collected."""
import datetime
from typing import Optional

from nsgc.dto.cleanup import CleanupPolicy
from nsgc.dto.namespace import NamespaceDescriptor

def skip_reason(namespace: NamespaceDescriptor, policy: CleanupPolicy, now: datetime.datetime) -> Optional[str]:
    """Return why the namespace must be kept, or None when it may be removed."""
    if namespace.name in policy.excluded_namespaces:
        return "excluded"
    if policy.ignore_label and policy.ignore_label in namespace.labels:
        return "ignore label"
    if namespace.creation_timestamp is None:
        return "no creation timestamp"
    if namespace.age(now) <= policy.max_age:
        return "not old enough"
    return None

def is_eligible(namespace: NamespaceDescriptor, policy: CleanupPolicy, now: datetime.datetime) -> bool:
    return skip_reason(namespace, policy, now) is None
