from typing import Protocol, List
from nsgc.dto.namespace import NamespaceDescriptor

class NamespaceServiceProtocol(Protocol):
    def list_namespaces(self) -> List[NamespaceDescriptor]:
        ...

    def get_namespace(self, name: str) -> NamespaceDescriptor:
        ...

    def delete_namespace(self, name: str) -> None:
        ...
