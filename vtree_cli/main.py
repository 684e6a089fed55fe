# vtree_cli/main.py
import importlib.util
from pathlib import Path

import typer

from vtree import MemoryHost, Renderer, VirtualNode
from vtree.log import configure_logging

from .demo import counter_app

app = typer.Typer(
    name="vtree",
    help="Render vtree element trees into a headless host and print the markup.",
    add_completion=False,
)


def _log_level(verbose: bool) -> str:
    return "DEBUG" if verbose else "WARNING"


@app.command()
def demo(
    clicks: int = typer.Option(2, "--clicks", "-n", min=0, help="How many clicks to simulate."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every reconciliation step."),
):
    """
    Mounts a counter component and clicks it, printing the markup after each step.
    """
    configure_logging(_log_level(verbose))
    host = MemoryHost()
    renderer = Renderer(host=host)
    container = host.create_container()

    renderer.render(counter_app(), container)
    print(f"mounted: {container.inner_html}")

    button = container.query_selector("button")
    for step in range(1, clicks + 1):
        button.click()
        print(f"click {step}: {container.inner_html}")

    if container.query_selector("button") is not button:
        print("❌ Error: the button was re-created instead of updated")
        raise typer.Exit(code=1)


@app.command()
def render(
    file_path: Path = typer.Argument(..., help="Python file that defines the tree to render."),
    attr: str = typer.Option("app", "--attr", "-a", help="Name of the element (or zero-arg factory) in the file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every reconciliation step."),
):
    """
    Imports FILE_PATH, renders the element it exposes and prints the markup.
    """
    configure_logging(_log_level(verbose))
    if not file_path.exists():
        print(f"❌ Error: file not found at '{file_path}'")
        raise typer.Exit(code=1)

    spec = importlib.util.spec_from_file_location(file_path.stem, file_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    target = getattr(module, attr, None)
    if target is None:
        print(f"❌ Error: '{file_path}' has no attribute '{attr}'")
        raise typer.Exit(code=1)
    element = target() if callable(target) else target
    if not isinstance(element, VirtualNode):
        print(f"❌ Error: '{attr}' did not produce a VirtualNode (got {type(element).__name__})")
        raise typer.Exit(code=1)

    host = MemoryHost()
    container = host.create_container()
    Renderer(host=host).render(element, container)
    print(container.inner_html)


if __name__ == "__main__":
    app()
