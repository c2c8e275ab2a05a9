import datetime
import json
import shutil
import subprocess
from typing import List, Optional

from nsgc.dto.release import ReleaseDescriptor
from nsgc.util.errors import HelmClientError, ReleaseListError, ReleaseUninstallError
from nsgc.util.logger import log

LIST_TIMEOUT_SECONDS = 60
# Extra time given to the helm process beyond its own --timeout.
UNINSTALL_GRACE_SECONDS = 30

class HelmService():
    def __init__(self, helm_binary: str = "helm", kubeconfig: Optional[str] = None):
        path = shutil.which(helm_binary)
        if path is None:
            raise HelmClientError(f"helm binary '{helm_binary}' not found in PATH")
        self.helm_binary = path
        self.kubeconfig = kubeconfig

    def list_releases(self, namespace: str) -> List[ReleaseDescriptor]:
        args = ["list", "--namespace", namespace, "--all", "--max", "0", "--output", "json"]
        try:
            result = self._run(args, LIST_TIMEOUT_SECONDS)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ReleaseListError(f"failed to list Helm releases in namespace {namespace}: {e}", namespace=namespace) from e

        if result.returncode != 0:
            raise ReleaseListError(
                f"failed to list Helm releases in namespace {namespace}: {result.stderr.strip()[:500]}",
                namespace=namespace,
            )

        try:
            items = json.loads(result.stdout or "[]")
            if not isinstance(items, list):
                raise ValueError("expected a JSON list")
            releases = [ReleaseDescriptor.from_helm(item) for item in items]
        except (ValueError, KeyError, TypeError) as e:
            raise ReleaseListError(f"unexpected helm list output for namespace {namespace}: {e}", namespace=namespace) from e

        # helm scopes by --namespace already, this only guards against odd output
        return [release for release in releases if release.namespace in ("", namespace)]

    def uninstall_release(self, release_name: str, namespace: str, timeout: datetime.timedelta) -> None:
        seconds = max(1, int(timeout.total_seconds()))
        args = ["uninstall", release_name, "--namespace", namespace, "--wait", "--timeout", f"{seconds}s"]
        try:
            result = self._run(args, seconds + UNINSTALL_GRACE_SECONDS)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ReleaseUninstallError(
                f"failed to uninstall Helm release {release_name} in namespace {namespace}: {e}",
                namespace=namespace, release=release_name,
            ) from e

        if result.returncode != 0:
            raise ReleaseUninstallError(
                f"failed to uninstall Helm release {release_name} in namespace {namespace}: {result.stderr.strip()[:500]}",
                namespace=namespace, release=release_name,
            )
        log(f"Helm release {release_name} uninstalled from namespace {namespace}", "DEBUG")

    def _run(self, args: List[str], timeout: float) -> subprocess.CompletedProcess:
        cmd = [self.helm_binary] + args
        if self.kubeconfig:
            cmd += ["--kubeconfig", self.kubeconfig]
        log(f"helm> {' '.join(cmd)}", "DEBUG")
        return subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
