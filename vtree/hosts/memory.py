# vtree/hosts/memory.py
"""
A headless, DOM-like host.

Nodes live entirely in Python, which makes this host the default for tests,
the CLI and any environment without a display.
"""
import html
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..base import TEXT_NODE
from ..host import HostAdapter

# Property names whose markup attribute is spelled differently.
ATTRIBUTE_ALIASES = {"className": "class", "htmlFor": "for"}

VOID_TAGS = {"br", "hr", "img", "input", "meta", "link"}


@dataclass
class HostEvent:
    """What a listener receives when an event is dispatched."""
    type: str
    target: "HostNode"
    detail: Any = None


class HostNode:
    """A node of the in-memory tree."""

    def __init__(self, tag: str):
        self.tag = tag
        self.attributes: Dict[str, Any] = {}
        self.listeners: Dict[str, List[Callable]] = {}
        self.children: List["HostNode"] = []
        self.parent: Optional["HostNode"] = None

    @property
    def is_text(self) -> bool:
        return self.tag == TEXT_NODE

    @property
    def node_value(self) -> Optional[str]:
        return self.attributes.get("nodeValue")

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def dispatch(self, event_type: str, detail: Any = None) -> int:
        """Call every listener registered for ``event_type``; returns how many ran."""
        callbacks = list(self.listeners.get(event_type, ()))
        event = HostEvent(event_type, self, detail)
        for callback in callbacks:
            callback(event)
        return len(callbacks)

    def click(self) -> int:
        return self.dispatch("click")

    def query_selector(self, tag: str) -> Optional["HostNode"]:
        """First descendant with the given tag, depth-first."""
        for child in self.children:
            if child.tag == tag:
                return child
            found = child.query_selector(tag)
            if found is not None:
                return found
        return None

    @property
    def text_content(self) -> str:
        if self.is_text:
            return self.node_value or ""
        return "".join(child.text_content for child in self.children)

    @property
    def inner_html(self) -> str:
        return "".join(child.outer_html for child in self.children)

    @property
    def outer_html(self) -> str:
        if self.is_text:
            return html.escape(self.node_value or "", quote=False)
        attrs = ""
        for name in sorted(self.attributes):
            value = self.attributes[name]
            if value is None or value is False:
                continue
            attr_name = ATTRIBUTE_ALIASES.get(name, name)
            if value is True:
                attrs += f" {attr_name}"
            else:
                attrs += f' {attr_name}="{html.escape(str(value), quote=True)}"'
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs}>"
        return f"<{self.tag}{attrs}>{self.inner_html}</{self.tag}>"

    def __repr__(self):
        if self.is_text:
            return f"HostNode(#text {self.node_value!r})"
        return f"HostNode(<{self.tag}>, children={len(self.children)})"


class MemoryHost(HostAdapter):
    """
    Host adapter over ``HostNode`` trees.

    Every call is tallied in ``mutations`` (keyed by method name) so callers
    can check how much work a render pass did.
    """

    def __init__(self):
        self.mutations: Counter = Counter()

    def create_container(self, tag: str = "body") -> HostNode:
        """A detached node to render into. Not counted as a mutation."""
        return HostNode(tag)

    def reset_counts(self) -> None:
        self.mutations.clear()

    def structural_mutations(self) -> int:
        """Node creations and tree edits, excluding property and listener traffic."""
        return sum(
            self.mutations[name]
            for name in ("create_primitive", "append_child", "replace_child", "remove_child")
        )

    # ----- HostAdapter -----
    def create_primitive(self, kind: str, text: Optional[str] = None) -> HostNode:
        self.mutations["create_primitive"] += 1
        node = HostNode(kind)
        if kind == TEXT_NODE:
            node.attributes["nodeValue"] = "" if text is None else text
        return node

    def append_child(self, parent: HostNode, child: HostNode) -> None:
        self.mutations["append_child"] += 1
        self._detach(child)
        parent.children.append(child)
        child.parent = parent

    def replace_child(self, parent: HostNode, new: HostNode, old: HostNode) -> None:
        self.mutations["replace_child"] += 1
        index = self._index_of(parent, old)
        self._detach(new)
        parent.children[index] = new
        new.parent = parent
        old.parent = None

    def remove_child(self, parent: HostNode, child: HostNode) -> None:
        self.mutations["remove_child"] += 1
        parent.children.pop(self._index_of(parent, child))
        child.parent = None

    def set_property(self, handle: HostNode, name: str, value: Any) -> None:
        self.mutations["set_property"] += 1
        handle.attributes[name] = value

    def clear_property(self, handle: HostNode, name: str) -> None:
        self.mutations["clear_property"] += 1
        handle.attributes.pop(name, None)

    def add_listener(self, handle: HostNode, event_type: str, callback: Callable) -> None:
        self.mutations["add_listener"] += 1
        callbacks = handle.listeners.setdefault(event_type, [])
        # Same semantics as the DOM: a callback registers at most once per type.
        if callback not in callbacks:
            callbacks.append(callback)

    def remove_listener(self, handle: HostNode, event_type: str, callback: Callable) -> None:
        self.mutations["remove_listener"] += 1
        callbacks = handle.listeners.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)
        if not callbacks:
            handle.listeners.pop(event_type, None)

    def parent_of(self, handle: HostNode) -> Optional[HostNode]:
        return handle.parent

    def clear_children(self, container: HostNode) -> None:
        for child in container.children:
            child.parent = None
        container.children.clear()

    # ----- helpers -----
    @staticmethod
    def _index_of(parent: HostNode, child: HostNode) -> int:
        for index, candidate in enumerate(parent.children):
            if candidate is child:
                return index
        raise ValueError(f"{child!r} is not a child of {parent!r}")

    def _detach(self, node: HostNode) -> None:
        if node.parent is not None:
            node.parent.children.remove(node)
            node.parent = None
