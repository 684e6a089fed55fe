# vtree/__init__.py

"""
vtree - keeps a host tree in step with a declarative virtual tree.

Describe the tree with ``createElement``, hand it to ``render`` with a
container, and render again whenever the description changes: only the
positions that differ touch the host. Components hold state and re-render
themselves in place through ``setState``.
"""

from .base import VirtualNode, NodeTag, TEXT_NODE, createElement, text
from .config import Config, get_config
from .core import Renderer, render, teardown
from .errors import RenderContractError
from .host import HostAdapter
from .hosts import MemoryHost, HostNode, HostEvent
from .instance import Instance
from .reconciler import Reconciler
from .state import Component, ComponentPhase

__all__ = [
    "VirtualNode", "NodeTag", "TEXT_NODE", "createElement", "text",
    "Config", "get_config",
    "Renderer", "render", "teardown",
    "RenderContractError",
    "HostAdapter", "MemoryHost", "HostNode", "HostEvent",
    "Instance", "Reconciler",
    "Component", "ComponentPhase",
]
