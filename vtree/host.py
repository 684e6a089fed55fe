# vtree/host.py
"""
The capability set the reconciler drives.

A host adapter owns the real nodes (DOM-like objects, Qt objects, ...). The
engine only ever holds the opaque handles it returns and hands them back.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

Handle = Any
Listener = Callable[..., Any]


class HostAdapter(ABC):

    @abstractmethod
    def create_primitive(self, kind: str, text: Optional[str] = None) -> Handle:
        """Create a node for ``kind``. Text nodes receive their initial value."""

    @abstractmethod
    def append_child(self, parent: Handle, child: Handle) -> None:
        ...

    @abstractmethod
    def replace_child(self, parent: Handle, new: Handle, old: Handle) -> None:
        """Put ``new`` at the position ``old`` occupies under ``parent``, detaching ``old``."""

    @abstractmethod
    def remove_child(self, parent: Handle, child: Handle) -> None:
        ...

    @abstractmethod
    def set_property(self, handle: Handle, name: str, value: Any) -> None:
        ...

    @abstractmethod
    def clear_property(self, handle: Handle, name: str) -> None:
        ...

    @abstractmethod
    def add_listener(self, handle: Handle, event_type: str, callback: Listener) -> None:
        ...

    @abstractmethod
    def remove_listener(self, handle: Handle, event_type: str, callback: Listener) -> None:
        ...

    @abstractmethod
    def parent_of(self, handle: Handle) -> Optional[Handle]:
        """Return the host parent of ``handle``, or None when detached."""

    @abstractmethod
    def clear_children(self, container: Handle) -> None:
        """Detach everything below ``container``."""
