# vtree/hosts/__init__.py
# The Qt host is imported from vtree.hosts.qt so PySide6 loads only when used.
from .memory import MemoryHost, HostNode, HostEvent

__all__ = ["MemoryHost", "HostNode", "HostEvent", "make_host"]


def make_host(name: str):
    """Build a host adapter from its config name ('memory' or 'qt')."""
    if name == "memory":
        return MemoryHost()
    if name == "qt":
        from .qt import QtObjectHost
        return QtObjectHost()
    raise ValueError(f"Unknown host {name!r}; expected 'memory' or 'qt'")
