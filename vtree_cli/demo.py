# vtree_cli/demo.py
from vtree import Component, createElement


class Counter(Component):
    """A button that counts its own clicks, next to a static label."""

    def initState(self):
        self.state = {"count": self.props.get("start", 0)}

    def increment(self, event=None):
        self.setState({"count": self.state["count"] + 1})

    def render(self):
        return createElement(
            "div",
            {"className": "counter"},
            createElement("span", {"className": "label"}, self.props.get("label", "Count")),
            createElement("button", {"onClick": self.increment}, str(self.state["count"])),
        )


def counter_app(label: str = "Count", start: int = 0):
    return createElement(Counter, {"label": label, "start": start})
