"""Exceptions raised by kube-ns-gc.

Everything inherits from NamespaceGCError. Messages name the failed
operation and the namespace or release it was acting on.
"""


class NamespaceGCError(Exception):
    """Base exception for the namespace garbage collector."""

    pass


class ConfigError(NamespaceGCError):
    """Raised when the configuration file cannot be read or is invalid."""

    pass


class KubernetesClientError(NamespaceGCError):
    """Raised when no Kubernetes client configuration can be loaded."""

    pass


class NamespaceError(NamespaceGCError):
    """Base exception for namespace operations."""

    def __init__(self, message: str, namespace: str = ""):
        self.namespace = namespace
        super().__init__(message)


class NamespaceListError(NamespaceError):
    """Raised when namespaces cannot be listed."""

    pass


class NamespaceNotFound(NamespaceError):
    """Raised when a namespace no longer exists."""

    pass


class NamespaceLookupError(NamespaceError):
    """Raised when reading a namespace fails for a reason other than 404."""

    pass


class NamespaceDeletionError(NamespaceError):
    """Raised when a namespace delete is rejected or cannot be confirmed."""

    pass


class NamespaceDeletionTimeout(NamespaceDeletionError):
    """Raised when a deleted namespace is still visible after the timeout."""

    pass


class HelmError(NamespaceGCError):
    """Base exception for Helm operations."""

    def __init__(self, message: str, namespace: str = "", release: str = ""):
        self.namespace = namespace
        self.release = release
        super().__init__(message)


class HelmClientError(HelmError):
    """Raised when the helm binary is not usable."""

    pass


class ReleaseListError(HelmError):
    """Raised when the releases of a namespace cannot be listed."""

    pass


class ReleaseUninstallError(HelmError):
    """Raised when a single release fails to uninstall."""

    pass


class ReleaseCleanupError(HelmError):
    """Raised when one or more releases of a namespace failed to uninstall.

    Carries the individual ReleaseUninstallError instances in ``failures``.
    """

    def __init__(self, namespace: str, failures: list):
        self.failures = failures
        names = ", ".join(f.release for f in failures)
        super().__init__(
            f"failed to uninstall {len(failures)} Helm release(s) in namespace {namespace}: {names}",
            namespace=namespace,
        )


class NotificationError(NamespaceGCError):
    """Raised when a notification could not be delivered."""

    pass
