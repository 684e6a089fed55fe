# vtree/instance.py
import weakref
from typing import TYPE_CHECKING, Iterator, List, Optional

from .base import VirtualNode
from .host import Handle

if TYPE_CHECKING:
    from .state import Component


class Instance:
    """
    The live record of what is rendered at one position.

    Host and text instances own a host handle and keep ``child_instances`` in
    host-child order. Component instances keep their single rendered child in
    ``child_instance`` and report that child's handle as their own, so the
    handle stays correct when a nested component swaps its root node.
    """

    def __init__(
        self,
        element: VirtualNode,
        host_handle: Handle = None,
        child_instances: Optional[List["Instance"]] = None,
        component: Optional["Component"] = None,
    ):
        self.element = element
        self._host_handle = host_handle
        self.child_instances: List["Instance"] = child_instances if child_instances is not None else []
        self.child_instance: Optional["Instance"] = None
        self.component = component

    @property
    def host_handle(self) -> Handle:
        if self.child_instance is not None:
            return self.child_instance.host_handle
        return self._host_handle

    @property
    def is_component(self) -> bool:
        return self.component is not None

    def walk(self) -> Iterator["Instance"]:
        """This instance and every instance below it, parents first."""
        yield self
        if self.child_instance is not None:
            yield from self.child_instance.walk()
        for child in self.child_instances:
            yield from child.walk()

    def __repr__(self):
        return f"Instance({self.element!r}, handle={self.host_handle!r})"


class ParentIndex:
    """
    Engine-side record of which host handle each handle was attached under.

    Lets a component find where to re-render without relying on the host
    exposing parent links. Entries vanish with their handles.
    """

    def __init__(self):
        self._parents: "weakref.WeakKeyDictionary[Handle, Handle]" = weakref.WeakKeyDictionary()

    def attach(self, child: Handle, parent: Handle) -> None:
        self._parents[child] = parent

    def detach(self, child: Handle) -> None:
        self._parents.pop(child, None)

    def get(self, child: Handle) -> Optional[Handle]:
        return self._parents.get(child)

    def __contains__(self, child: Handle) -> bool:
        return child in self._parents
