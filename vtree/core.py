# vtree/core.py
import logging
from typing import Dict, Optional

from .base import VirtualNode
from .config import Config
from .host import Handle, HostAdapter
from .hosts import make_host
from .instance import Instance
from .log import configure_logging
from .reconciler import Reconciler

logger = logging.getLogger(__name__)


class Renderer:
    """
    Owns the root binding: one root Instance per container.

    ``Renderer.instance()`` is the process-wide renderer behind the
    module-level ``render`` and ``teardown`` functions. Separate Renderer
    objects can be created for isolated trees (tests do this).
    """

    _instance: Optional["Renderer"] = None

    @classmethod
    def instance(cls) -> "Renderer":
        if cls._instance is None:
            config = Config()
            configure_logging(config.get("log_level", "WARNING"))
            cls._instance = cls(config=config)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Tear down and forget the process-wide renderer."""
        if cls._instance is not None:
            cls._instance.teardown()
        cls._instance = None

    def __init__(self, host: Optional[HostAdapter] = None, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.host = host if host is not None else make_host(self.config.get("host", "memory"))
        self.reconciler = Reconciler(
            self.host,
            event_prefix=self.config.get("event_prefix", "on"),
            warn_on_reentrant_updates=bool(self.config.get("warn_on_reentrant_updates", True)),
        )
        self._roots: Dict[Handle, Instance] = {}

    def render(self, element: Optional[VirtualNode], container: Handle) -> None:
        """
        Mounts or updates the tree under ``container``.

        Rendering an equal tree again creates, moves and removes nothing and
        keeps the root Instance.
        """
        previous = self._roots.get(container)
        root = self.reconciler.reconcile(container, previous, element)
        if root is None:
            self._roots.pop(container, None)
        else:
            self._roots[container] = root

    def root_instance(self, container: Handle) -> Optional[Instance]:
        return self._roots.get(container)

    @property
    def containers(self):
        return list(self._roots)

    def teardown(self, container: Optional[Handle] = None) -> None:
        """
        Forgets the root Instance of ``container`` (all containers when None)
        and empties the container on the host.
        """
        targets = [container] if container is not None else list(self._roots)
        for target in targets:
            root = self._roots.pop(target, None)
            if root is not None:
                self.reconciler.discard(root)
            self.host.clear_children(target)
            logger.debug("teardown of %r", target)


def render(element: Optional[VirtualNode], container: Handle) -> None:
    """Renders into ``container`` with the process-wide renderer."""
    Renderer.instance().render(element, container)


def teardown(container: Optional[Handle] = None) -> None:
    """Clears the process-wide root binding and the container's contents."""
    Renderer.instance().teardown(container)
