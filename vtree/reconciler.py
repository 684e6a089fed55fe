# vtree/reconciler.py
"""
The diff/patch engine.

Given the instance rendered at a position and the element that should be there
now, the reconciler decides between four outcomes and emits the matching host
calls:

- **mount**: nothing was there, create it.
- **unmount**: nothing should be there, remove it.
- **replace**: the kind changed, build the new subtree and swap it in.
- **update in place**: same kind, diff properties and recurse into children
  (or, for a component, re-render it and reconcile its single child).

Children are matched by position only. Positions that end up empty are
compacted out, so ``child_instances[i]`` is always the i-th host child.
"""
import logging
from typing import List, Optional

from .base import NodeTag, VirtualNode
from .errors import RenderContractError
from .host import Handle, HostAdapter
from .instance import Instance, ParentIndex
from .props import PropertyDiffer
from .state import Component, Updater

logger = logging.getLogger(__name__)


class Reconciler:
    def __init__(self, host: HostAdapter, event_prefix: str = "on", warn_on_reentrant_updates: bool = True):
        self.host = host
        self.differ = PropertyDiffer(host, event_prefix)
        self.parents = ParentIndex()
        self.warn_on_reentrant_updates = warn_on_reentrant_updates
        # Number of reconcile() calls currently on the stack.
        self._depth = 0
        logger.debug("Reconciler initialized (host=%s, event_prefix=%r)", type(host).__name__, event_prefix)

    @property
    def in_progress(self) -> bool:
        return self._depth > 0

    def reconcile(
        self,
        container: Handle,
        previous: Optional[Instance],
        element: Optional[VirtualNode],
    ) -> Optional[Instance]:
        """
        Brings the position under ``container`` from ``previous`` to ``element``.

        Returns the instance now rendered there (the same object when it was
        updated in place) or None when the position is empty.
        """
        self._depth += 1
        try:
            return self._reconcile(container, previous, element)
        finally:
            self._depth -= 1

    def _reconcile(self, container, previous, element):
        if previous is None:
            if element is None:
                return None
            instance = self.instantiate(element)
            self.host.append_child(container, instance.host_handle)
            self.parents.attach(instance.host_handle, container)
            logger.debug("mount %r", element)
            return instance

        if element is None:
            self.host.remove_child(container, previous.host_handle)
            self.discard(previous)
            logger.debug("unmount %r", previous.element)
            return None

        if previous.element.kind != element.kind:
            instance = self.instantiate(element)
            self.host.replace_child(container, instance.host_handle, previous.host_handle)
            self.discard(previous)
            self.parents.attach(instance.host_handle, container)
            logger.debug("replace %r with %r", previous.element, element)
            return instance

        if element.tag is NodeTag.COMPONENT:
            return self._update_component(container, previous, element)
        return self._update_host(previous, element)

    def _update_host(self, instance: Instance, element: VirtualNode) -> Instance:
        self.differ.update(instance.host_handle, instance.element.props, element.props)
        instance.child_instances = self.reconcile_children(instance, element)
        instance.element = element
        return instance

    def _update_component(self, container: Handle, instance: Instance, element: VirtualNode) -> Instance:
        component = instance.component
        component.props = element.component_props()
        child_element = self._render(component)
        instance.child_instance = self._reconcile(container, instance.child_instance, child_element)
        instance.element = element
        component._mark_updated()
        logger.debug("update component %s", type(component).__name__)
        return instance

    def reconcile_children(self, instance: Instance, element: VirtualNode) -> List[Instance]:
        """Positional diff of ``instance``'s children against ``element.children``."""
        handle = instance.host_handle
        previous = instance.child_instances
        upcoming = element.children
        reconciled = []
        for index in range(max(len(previous), len(upcoming))):
            child = self._reconcile(
                handle,
                previous[index] if index < len(previous) else None,
                upcoming[index] if index < len(upcoming) else None,
            )
            if child is not None:
                reconciled.append(child)
        return reconciled

    def instantiate(self, element: VirtualNode) -> Instance:
        """Builds the host subtree for ``element`` without attaching its root."""
        if element.tag is NodeTag.COMPONENT:
            return self._instantiate_component(element)

        initial_text = element.props.get("nodeValue") if element.tag is NodeTag.TEXT else None
        handle = self.host.create_primitive(element.kind, initial_text)
        self.differ.update(handle, {}, element.props)

        child_instances = [self.instantiate(child) for child in element.children]
        for child in child_instances:
            self.host.append_child(handle, child.host_handle)
            self.parents.attach(child.host_handle, handle)
        return Instance(element, handle, child_instances)

    def _instantiate_component(self, element: VirtualNode) -> Instance:
        kind = element.kind
        if not (isinstance(kind, type) and issubclass(kind, Component)):
            raise RenderContractError(f"Component kind must be a Component subclass, got {kind!r}")

        component = kind(element.component_props())
        instance = Instance(element, component=component)
        component.initState()
        child_element = self._render(component)
        instance.child_instance = self.instantiate(child_element)
        component._mount(Updater(self, instance))
        return instance

    @staticmethod
    def _render(component: Component) -> VirtualNode:
        rendered = component.render()
        if not isinstance(rendered, VirtualNode):
            raise RenderContractError(
                f"{type(component).__name__}.render() must return a single VirtualNode, "
                f"got {type(rendered).__name__}"
            )
        return rendered

    def discard(self, instance: Instance) -> None:
        """Forgets an orphaned subtree: components become unmounted, handles leave the index."""
        for orphan in instance.walk():
            if orphan.component is not None:
                orphan.component._unmount()
            else:
                self.parents.detach(orphan.host_handle)

    def parent_of(self, handle: Handle) -> Optional[Handle]:
        parent = self.parents.get(handle)
        if parent is None:
            parent = self.host.parent_of(handle)
        return parent

    def rerender(self, instance: Instance) -> Optional[Instance]:
        """
        Re-renders a component instance where it stands, with its current element.

        This is what ``Component.setState`` ends up calling.
        """
        if self.in_progress and self.warn_on_reentrant_updates:
            logger.warning(
                "Re-entrant update of %r during a render pass; the result is undefined",
                instance.element,
            )
        parent = self.parent_of(instance.host_handle)
        if parent is None:
            logger.warning("Cannot re-render %r: its host node is detached", instance.element)
            return None
        return self.reconcile(parent, instance, instance.element)
