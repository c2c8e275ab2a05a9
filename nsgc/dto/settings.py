import datetime
from dataclasses import dataclass, field
from typing import List

from nsgc.dto.cleanup import CleanupPolicy

DEFAULT_EXCLUDED_NAMESPACES = ["kube-system", "kube-public", "kube-node-lease", "default"]
DEFAULT_IGNORE_LABEL = "kube-ns-gc.ignore"

@dataclass(frozen=True)
class NotificationToggles:
    startup:              bool = True
    namespace_deleted:    bool = True
    helm_release_deleted: bool = True
    cleanup_summary:      bool = True
    errors:               bool = True

@dataclass(frozen=True)
class TelegramSettings:
    enabled:       bool                 = False
    bot_token:     str                  = ""
    chat_id:       str                  = ""
    parse_mode:    str                  = "Markdown"
    notifications: NotificationToggles  = field(default_factory=NotificationToggles)

@dataclass(frozen=True)
class Settings:
    cleanup_interval:         datetime.timedelta  = datetime.timedelta(hours=24)
    namespace_max_age:        datetime.timedelta  = datetime.timedelta(days=7)
    helm_release_timeout:     datetime.timedelta  = datetime.timedelta(minutes=5)
    namespace_delete_timeout: datetime.timedelta  = datetime.timedelta(minutes=5)
    namespace_poll_interval:  datetime.timedelta  = datetime.timedelta(seconds=10)
    excluded_namespaces:      List[str]           = field(default_factory=lambda: list(DEFAULT_EXCLUDED_NAMESPACES))
    ignore_label:             str                 = DEFAULT_IGNORE_LABEL
    log_level:                str                 = "info"
    port:                     int                 = 8080
    telegram:                 TelegramSettings    = field(default_factory=TelegramSettings)

    def policy(self) -> CleanupPolicy:
        return CleanupPolicy(
            max_age=self.namespace_max_age,
            excluded_namespaces=frozenset(self.excluded_namespaces),
            ignore_label=self.ignore_label or None,
            release_uninstall_timeout=self.helm_release_timeout,
            namespace_delete_timeout=self.namespace_delete_timeout,
            namespace_poll_interval=self.namespace_poll_interval,
        )
