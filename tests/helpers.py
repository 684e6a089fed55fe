# tests/helpers.py
import unittest

from vtree import MemoryHost, Renderer


class RenderTestCase(unittest.TestCase):
    """Fresh memory host, renderer and container per test."""

    def setUp(self):
        self.host = MemoryHost()
        self.renderer = Renderer(host=self.host)
        self.container = self.host.create_container("body")

    def tearDown(self):
        self.renderer.teardown()

    def render(self, element):
        """Renders into the shared container; returns (container, first child node)."""
        self.renderer.render(element, self.container)
        node = self.container.children[0] if self.container.children else None
        return self.container, node

    @property
    def root(self):
        return self.renderer.root_instance(self.container)
