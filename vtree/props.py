# vtree/props.py
from typing import Any, Dict, Iterator, Tuple

from .base import CHILDREN
from .host import Handle, HostAdapter


class PropertyDiffer:
    """
    Moves a host node from one property set to another.

    Keys are split into listeners (``onClick`` -> event type ``click``) and
    plain properties (everything else except ``children``). Listener
    callbacks are never written to the node as properties.
    """

    def __init__(self, host: HostAdapter, event_prefix: str = "on"):
        self.host = host
        self.event_prefix = event_prefix

    def is_listener(self, name: str) -> bool:
        # any key past the bare prefix: onClick and onclick alike
        return name.startswith(self.event_prefix) and len(name) > len(self.event_prefix)

    def is_plain(self, name: str) -> bool:
        return name != CHILDREN and not self.is_listener(name)

    def event_type(self, name: str) -> str:
        return name[len(self.event_prefix):].lower()

    def listeners(self, props: Dict[str, Any]) -> Iterator[Tuple[str, Any]]:
        for name, value in props.items():
            if self.is_listener(name):
                yield self.event_type(name), value

    def update(self, handle: Handle, prev_props: Dict[str, Any], next_props: Dict[str, Any]) -> None:
        """
        Clears every old plain property and listener, then applies the new ones.

        Clearing first means a listener is never registered twice and a stale
        handler never survives a prop being removed or replaced.
        """
        host = self.host
        for name in prev_props:
            if self.is_plain(name):
                host.clear_property(handle, name)
        for event_type, callback in self.listeners(prev_props):
            host.remove_listener(handle, event_type, callback)
        for name, value in next_props.items():
            if self.is_plain(name):
                host.set_property(handle, name, value)
        for event_type, callback in self.listeners(next_props):
            host.add_listener(handle, event_type, callback)
