# vtree/hosts/qt.py
"""
Host adapter over PySide6 ``QObject`` trees.

Each primitive is a ``HostObject``: its kind is the ``objectName``, plain
properties are Qt dynamic properties and parent linkage is the genuine QObject
parent. Only QtCore is used, so no display or QApplication is needed.
"""
import html
from typing import Any, Callable, Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from ..base import TEXT_NODE
from ..host import HostAdapter
from .memory import HostEvent


class HostObject(QObject):
    eventFired = Signal(str, object)

    def __init__(self, kind: str):
        super().__init__()
        self.setObjectName(kind)
        self._listeners: Dict[str, List[Callable]] = {}
        self.eventFired.connect(self._deliver)

    @property
    def kind(self) -> str:
        return self.objectName()

    def host_children(self) -> List["HostObject"]:
        return [child for child in self.children() if isinstance(child, HostObject)]

    def dispatch(self, event_type: str, detail: Any = None) -> None:
        self.eventFired.emit(event_type, detail)

    def click(self) -> None:
        self.dispatch("click")

    def _deliver(self, event_type: str, detail: Any) -> None:
        for callback in list(self._listeners.get(event_type, ())):
            callback(HostEvent(event_type, self, detail))

    def markup(self) -> str:
        if self.kind == TEXT_NODE:
            return html.escape(str(self.property("nodeValue") or ""), quote=False)
        inner = "".join(child.markup() for child in self.host_children())
        return f"<{self.kind}>{inner}</{self.kind}>"

    def __repr__(self):
        return f"HostObject({self.kind!r})"


class QtObjectHost(HostAdapter):

    def create_container(self, name: str = "root") -> HostObject:
        return HostObject(name)

    def create_primitive(self, kind: str, text: Optional[str] = None) -> HostObject:
        obj = HostObject(kind)
        if kind == TEXT_NODE:
            obj.setProperty("nodeValue", "" if text is None else text)
        return obj

    def append_child(self, parent: HostObject, child: HostObject) -> None:
        # setParent always appends to the end of the new parent's children.
        child.setParent(parent)

    def replace_child(self, parent: HostObject, new: HostObject, old: HostObject) -> None:
        siblings = parent.host_children()
        index = siblings.index(old)
        trailing = siblings[index + 1:]
        old.setParent(None)
        new.setParent(parent)
        # QObject has no insert-at; re-append the tail to restore the order.
        for sibling in trailing:
            sibling.setParent(None)
            sibling.setParent(parent)

    def remove_child(self, parent: HostObject, child: HostObject) -> None:
        if child.parent() is not parent:
            raise ValueError(f"{child!r} is not a child of {parent!r}")
        child.setParent(None)

    def set_property(self, handle: HostObject, name: str, value: Any) -> None:
        handle.setProperty(name, value)

    def clear_property(self, handle: HostObject, name: str) -> None:
        # An invalid variant removes a dynamic property.
        handle.setProperty(name, None)

    def add_listener(self, handle: HostObject, event_type: str, callback: Callable) -> None:
        callbacks = handle._listeners.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def remove_listener(self, handle: HostObject, event_type: str, callback: Callable) -> None:
        callbacks = handle._listeners.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def parent_of(self, handle: HostObject) -> Optional[QObject]:
        return handle.parent()

    def clear_children(self, container: HostObject) -> None:
        for child in container.host_children():
            child.setParent(None)
