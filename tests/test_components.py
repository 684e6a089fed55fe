# tests/test_components.py
import unittest

from vtree import Component, ComponentPhase, RenderContractError, createElement

from .helpers import RenderTestCase


class Counter(Component):
    def initState(self):
        self.state = {"count": self.props.get("start", 0)}

    def increment(self, event=None):
        self.setState({"count": self.state["count"] + 1})

    def render(self):
        return createElement("button", {"onClick": self.increment}, str(self.state["count"]))


class Label(Component):
    def render(self):
        return createElement("span", {"className": "label"}, self.props["text"])


class Panel(Component):
    """Wraps whatever children it is given."""
    def render(self):
        return createElement("section", {"title": self.props.get("title")}, *self.props["children"])


class Toggle(Component):
    """Switches its root node kind with its state."""
    def __init__(self, props):
        super().__init__(props)
        self.state = {"on": False}

    def render(self):
        if self.state["on"]:
            return createElement("strong", None, "on")
        return createElement("em", None, "off")


class Outer(Component):
    def initState(self):
        self.state = {"label": "outer"}

    def render(self):
        return createElement(Toggle, {"label": self.state["label"]})


class TestComponentRendering(RenderTestCase):

    def test_component_renders_its_output(self):
        container, _ = self.render(createElement(Label, {"text": "hi"}))
        self.assertEqual(container.inner_html, '<span class="label">hi</span>')
        instance = self.root
        self.assertTrue(instance.is_component)
        self.assertIs(instance.host_handle, instance.child_instance.host_handle)

    def test_component_receives_children(self):
        container, _ = self.render(
            createElement(Panel, {"title": "t"}, createElement("p", None, "one"), "two")
        )
        self.assertEqual(container.inner_html, '<section title="t"><p>one</p>two</section>')

    def test_new_props_update_the_same_component(self):
        self.render(createElement("div", None, createElement(Label, {"text": "a"})))
        component = self.root.child_instances[0].component
        span = self.container.query_selector("span")

        self.render(createElement("div", None, createElement(Label, {"text": "b"})))

        self.assertIs(self.root.child_instances[0].component, component)
        self.assertEqual(component.props["text"], "b")
        self.assertIs(self.container.query_selector("span"), span)
        self.assertEqual(span.text_content, "b")
        self.assertIs(component.phase, ComponentPhase.UPDATED)

    def test_switching_component_kind_replaces(self):
        self.render(createElement(Label, {"text": "a"}))
        label = self.root.component
        _, button = self.render(createElement(Counter, None))
        self.assertEqual(button.tag, "button")
        self.assertIs(label.phase, ComponentPhase.UNMOUNTED)

    def test_render_must_return_a_single_node(self):
        class Broken(Component):
            def render(self):
                return [createElement("a", None), createElement("b", None)]

        with self.assertRaises(RenderContractError):
            self.render(createElement(Broken, None))

    def test_render_returning_none_is_a_contract_violation(self):
        class Empty(Component):
            def render(self):
                return None

        with self.assertRaises(RenderContractError):
            self.render(createElement(Empty, None))

    def test_component_kind_must_be_a_component_class(self):
        class NotAComponent:
            def __init__(self, props):
                pass

        with self.assertRaises(RenderContractError):
            self.render(createElement(NotAComponent, None))

    def test_class_level_state_is_the_initial_state(self):
        class Greeting(Component):
            state = {"word": "hello"}

            def render(self):
                return createElement("p", None, self.state.get("word", "missing"))

        container, _ = self.render(createElement(Greeting, None))
        self.assertEqual(container.inner_html, "<p>hello</p>")

        component = self.root.component
        component.setState({"word": "bye"})
        self.assertEqual(container.inner_html, "<p>bye</p>")
        self.assertEqual(Greeting.state, {"word": "hello"})

    def test_missing_render_raises(self):
        with self.assertRaises(NotImplementedError):
            self.render(createElement(Component, None))


class TestSetState(RenderTestCase):

    def test_counter_increments_in_place(self):
        tree = createElement(
            "div", None,
            createElement("span", None, "static"),
            createElement(Counter, {"start": 5}),
        )
        container, div = self.render(tree)
        sibling = container.query_selector("span")
        button = container.query_selector("button")
        self.assertEqual(button.text_content, "5")
        self.host.reset_counts()

        button.click()
        self.assertEqual(button.text_content, "6")
        button.click()
        self.assertEqual(button.text_content, "7")

        self.assertIs(container.children[0], div)
        self.assertIs(container.query_selector("span"), sibling)
        self.assertIs(container.query_selector("button"), button)
        self.assertEqual(self.host.structural_mutations(), 0)

    def test_set_state_merges_shallowly(self):
        self.render(createElement(Counter, None))
        component = self.root.component
        component.setState({"extra": [1]})
        component.setState(count=3)
        self.assertEqual(component.state, {"count": 3, "extra": [1]})
        self.assertEqual(self.container.inner_html, "<button>3</button>")

    def test_set_state_keeps_props(self):
        self.render(createElement(Label, {"text": "kept"}))
        component = self.root.component
        component.setState({"anything": True})
        self.assertEqual(component.props["text"], "kept")
        self.assertEqual(self.container.inner_html, '<span class="label">kept</span>')

    def test_phases(self):
        self.render(createElement("div", None, createElement(Counter, None)))
        component = self.root.child_instances[0].component
        self.assertIs(component.phase, ComponentPhase.MOUNTED)
        self.assertTrue(component.is_mounted)

        component.increment()
        self.assertIs(component.phase, ComponentPhase.UPDATED)

        self.render(createElement("div", None))
        self.assertIs(component.phase, ComponentPhase.UNMOUNTED)
        self.assertFalse(component.is_mounted)

    def test_set_state_before_mount_only_merges(self):
        class Eager(Component):
            def initState(self):
                self.setState({"ready": True})

            def render(self):
                return createElement("p", None, "ready" if self.state.get("ready") else "no")

        container, _ = self.render(createElement(Eager, None))
        self.assertEqual(container.inner_html, "<p>ready</p>")

    def test_set_state_after_unmount_warns_and_does_nothing(self):
        self.render(createElement(Counter, None))
        component = self.root.component
        self.render(createElement("p", None, "gone"))
        self.host.reset_counts()

        with self.assertLogs("vtree.state", level="WARNING"):
            component.setState({"count": 10})

        self.assertEqual(component.state["count"], 10)
        self.assertEqual(sum(self.host.mutations.values()), 0)
        self.assertEqual(self.container.inner_html, "<p>gone</p>")

    def test_teardown_unmounts_components(self):
        self.render(createElement(Counter, None))
        component = self.root.component
        self.renderer.teardown()
        self.assertIs(component.phase, ComponentPhase.UNMOUNTED)

    def test_state_change_can_replace_the_root_node(self):
        container, _ = self.render(createElement("div", None, createElement(Toggle, None)))
        toggle_instance = self.root.child_instances[0]
        old = toggle_instance.host_handle

        toggle_instance.component.setState({"on": True})
        self.assertEqual(container.inner_html, "<div><strong>on</strong></div>")
        self.assertIsNot(toggle_instance.host_handle, old)
        self.assertIsNone(old.parent)

        toggle_instance.component.setState({"on": False})
        self.assertEqual(container.inner_html, "<div><em>off</em></div>")

    def test_nested_component_handle_follows_inner_replacement(self):
        container, _ = self.render(createElement(Outer, None))
        outer = self.root
        inner = outer.child_instance

        inner.component.setState({"on": True})
        self.assertIs(outer.host_handle, container.children[0])
        self.assertEqual(container.inner_html, "<strong>on</strong>")

        outer.component.setState({"label": "changed"})
        self.assertEqual(inner.component.props["label"], "changed")
        self.assertEqual(container.inner_html, "<strong>on</strong>")

    def test_reentrant_update_is_reported(self):
        class Poker(Component):
            target = None

            def render(self):
                if self.props.get("poke"):
                    Poker.target.setState({"count": 99})
                return createElement("i", None)

        self.render(createElement("div", None, createElement(Counter, None), createElement(Poker, None)))
        Poker.target = self.root.child_instances[0].component

        with self.assertLogs("vtree.reconciler", level="WARNING") as logs:
            self.render(
                createElement("div", None, createElement(Counter, None), createElement(Poker, {"poke": True}))
            )
        self.assertTrue(any("Re-entrant" in line for line in logs.output))
        self.assertEqual(self.container.query_selector("button").text_content, "99")


if __name__ == "__main__":
    unittest.main()
