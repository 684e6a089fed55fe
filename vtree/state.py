# vtree/state.py
import logging
import weakref
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import VirtualNode

if TYPE_CHECKING:
    from .instance import Instance
    from .reconciler import Reconciler

logger = logging.getLogger(__name__)


class ComponentPhase(Enum):
    CONSTRUCTED = "constructed"
    MOUNTED = "mounted"
    UPDATED = "updated"
    UNMOUNTED = "unmounted"


class Updater:
    """
    The self-update capability a mounted component receives.

    Holds only weak references: the instance tree owns the component, never
    the other way round.
    """

    def __init__(self, reconciler: "Reconciler", instance: "Instance"):
        self._reconciler_ref = weakref.ref(reconciler)
        self._instance_ref = weakref.ref(instance)

    def __call__(self) -> bool:
        reconciler = self._reconciler_ref()
        instance = self._instance_ref()
        if reconciler is None or instance is None:
            return False
        reconciler.rerender(instance)
        return True


class Component:
    """
    A unit of render logic with its own state.

    Subclasses implement ``render()`` and read ``self.props`` and
    ``self.state`` from it. Initial state is declared as a class attribute
    or set in ``__init__`` or ``initState()``:

        class Counter(Component):
            def initState(self):
                self.state = {"count": 0}

            def render(self):
                return createElement(
                    "button",
                    {"onClick": lambda event: self.setState({"count": self.state["count"] + 1})},
                    f"clicked {self.state['count']} times",
                )
    """

    def __init__(self, props: Optional[Dict[str, Any]] = None):
        self.props: Dict[str, Any] = dict(props or {})
        # a class-level ``state`` is the starting point; each instance gets its own copy
        self.state: Dict[str, Any] = dict(getattr(self, "state", None) or {})
        self.phase = ComponentPhase.CONSTRUCTED
        self._updater: Optional[Updater] = None

    def initState(self):
        """
        Called once after construction, before the first render.
        """
        pass

    def render(self) -> VirtualNode:
        """Describes what this component shows for its current props and state."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement render()")

    @property
    def is_mounted(self) -> bool:
        return self.phase in (ComponentPhase.MOUNTED, ComponentPhase.UPDATED)

    def setState(self, partial: Optional[Dict[str, Any]] = None, **changes: Any) -> None:
        """
        Merges ``partial`` (and keyword changes) into the state and re-renders
        this component in place, synchronously.

        Fields not mentioned keep their values. Before mount only the merge
        happens. Calling it while another render pass is running is not
        supported.
        """
        update = dict(partial or {})
        update.update(changes)
        self.state = {**self.state, **update}

        if self.phase is ComponentPhase.CONSTRUCTED:
            return
        if self.phase is ComponentPhase.UNMOUNTED or self._updater is None:
            logger.warning(
                "setState on unmounted %s ignored; state merged but nothing re-rendered",
                self.__class__.__name__,
            )
            return

        logger.debug("setState on %s: %s", self.__class__.__name__, sorted(update))
        if not self._updater():
            logger.warning(
                "setState on %s ignored; its renderer or instance no longer exists",
                self.__class__.__name__,
            )

    # ----- engine hooks -----
    def _mount(self, updater: Updater) -> None:
        self._updater = updater
        self.phase = ComponentPhase.MOUNTED

    def _mark_updated(self) -> None:
        self.phase = ComponentPhase.UPDATED

    def _unmount(self) -> None:
        self._updater = None
        self.phase = ComponentPhase.UNMOUNTED

    def __repr__(self):
        return f"{self.__class__.__name__}(phase={self.phase.value})"
