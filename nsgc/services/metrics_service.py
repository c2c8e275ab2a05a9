import datetime
from typing import Any, Callable, Dict

from nsgc.dto.settings import Settings
from nsgc.services.namespace_filter import is_eligible
from nsgc.services.protocol.kubernetes_services.namespace_service_protocol import NamespaceServiceProtocol
from nsgc.util.duration import format_duration

class MetricsService:
    """Computes the metrics snapshot from the live namespace list on every call."""

    def __init__(
            self,
            namespace_service: NamespaceServiceProtocol,
            settings: Settings,
            clock: Callable[[], datetime.datetime]
        ):
        self.namespace_service = namespace_service
        self.settings = settings
        self.policy = settings.policy()
        self.clock = clock

    def snapshot(self) -> Dict[str, Any]:
        namespaces = self.namespace_service.list_namespaces()
        now = self.clock()
        old_namespaces = sum(1 for namespace in namespaces if is_eligible(namespace, self.policy, now))
        return {
            "total_namespaces": len(namespaces),
            "old_namespaces": old_namespaces,
            # configured entries, duplicates included
            "excluded_namespaces": len(self.settings.excluded_namespaces),
            "cleanup_interval": format_duration(self.settings.cleanup_interval),
            "namespace_max_age": format_duration(self.settings.namespace_max_age),
        }
