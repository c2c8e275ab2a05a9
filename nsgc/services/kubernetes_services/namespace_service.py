import urllib3
from kubernetes import client
from nsgc.dto.namespace import NamespaceDescriptor
from nsgc.util.errors import NamespaceDeletionError, NamespaceListError, NamespaceLookupError, NamespaceNotFound
from nsgc.util.logger import log
from typing import List

API_ERRORS = (client.ApiException, urllib3.exceptions.HTTPError)

class NamespaceService():
    def __init__(self, config: client.Configuration, request_timeout: float = 30):
        api_client = client.ApiClient(configuration=config)
        self.v1 = client.CoreV1Api(api_client=api_client)
        self.request_timeout = request_timeout

    def list_namespaces(self) -> List[NamespaceDescriptor]:
        try:
            namespace_list = self.v1.list_namespace(_request_timeout=self.request_timeout)
        except API_ERRORS as e:
            raise NamespaceListError(f"failed to list namespaces: {_describe(e)}") from e
        return [NamespaceDescriptor.from_v1(namespace) for namespace in namespace_list.items]

    def get_namespace(self, name: str) -> NamespaceDescriptor:
        try:
            namespace = self.v1.read_namespace(name=name, _request_timeout=self.request_timeout)
        except client.ApiException as e:
            if e.status == 404:
                raise NamespaceNotFound(f"namespace {name} not found", namespace=name) from e
            raise NamespaceLookupError(f"failed to get namespace {name}: {_describe(e)}", namespace=name) from e
        except urllib3.exceptions.HTTPError as e:
            raise NamespaceLookupError(f"failed to get namespace {name}: {_describe(e)}", namespace=name) from e
        return NamespaceDescriptor.from_v1(namespace)

    def delete_namespace(self, name: str) -> None:
        try:
            self.v1.delete_namespace(name=name, _request_timeout=self.request_timeout)
        except API_ERRORS as e:
            raise NamespaceDeletionError(f"failed to delete namespace {name}: {_describe(e)}", namespace=name) from e
        log(f"Delete requested for namespace {name}", "DEBUG")

def _describe(e: Exception) -> str:
    if isinstance(e, client.ApiException):
        return f"{e.status} {e.reason}"
    return str(e)
