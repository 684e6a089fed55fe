# vtree/base.py
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union


# Reserved kind for text nodes. Host tags are plain element names, so a name
# that can never be a valid tag keeps the two apart.
TEXT_NODE = "#text"

# Reserved prop under which a component receives its children.
CHILDREN = "children"


class NodeTag(Enum):
    """The three shapes a VirtualNode can take."""
    HOST = "host"
    TEXT = "text"
    COMPONENT = "component"


def _tag_for(kind: Any) -> NodeTag:
    if kind == TEXT_NODE:
        return NodeTag.TEXT
    if isinstance(kind, str):
        return NodeTag.HOST
    return NodeTag.COMPONENT


@dataclass(frozen=True)
class VirtualNode:
    """
    Immutable description of what should exist at one position of the tree.

    :param kind: A host tag name, ``TEXT_NODE``, or a ``Component`` subclass.
    :param props: Read-only property mapping. Never holds the reserved
        ``children`` key.
    :param children: Ordered child nodes. Always present, possibly empty.

    Nodes compare by value but are unhashable, since props may hold
    unhashable values.
    """
    kind: Any
    props: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple["VirtualNode", ...] = ()
    tag: NodeTag = field(init=False, compare=False)

    __hash__ = None

    def __post_init__(self):
        # frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))
        object.__setattr__(self, "tag", _tag_for(self.kind))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_component(self) -> bool:
        return self.tag is NodeTag.COMPONENT

    def component_props(self) -> Dict[str, Any]:
        """Props as a component sees them, children included."""
        return {**self.props, CHILDREN: list(self.children)}

    def __repr__(self):
        name = getattr(self.kind, "__name__", self.kind)
        return f"VirtualNode({name!r}, props={dict(self.props)}, children={len(self.children)})"


Child = Union[VirtualNode, str, int, float, bool, None, list, tuple]


def _normalize_children(children) -> Tuple[VirtualNode, ...]:
    normalized = []
    for child in children:
        if isinstance(child, VirtualNode):
            normalized.append(child)
        elif isinstance(child, (list, tuple)):
            normalized.extend(_normalize_children(child))
        else:
            normalized.append(text(child))
    return tuple(normalized)


def text(value: Any) -> VirtualNode:
    """Wraps a raw scalar into a text node."""
    return VirtualNode(TEXT_NODE, {"nodeValue": str(value)})


def createElement(kind: Any, props: Dict[str, Any] = None, *children: Child) -> VirtualNode:
    """
    Builds a VirtualNode.

    Children that are not VirtualNodes are wrapped into text nodes holding
    their string form. Lists and tuples of children are spliced in place.

    Example:
        createElement("div", {"className": "row"},
            createElement("span", None, "hello"),
            42,
        )
    """
    props = dict(props or {})
    props.pop(CHILDREN, None)
    return VirtualNode(kind, props, _normalize_children(children))
