from __future__ import annotations

from rich.console import Console
from rich.table import Table

from kurobako_solver.solver.spec import Capability, SolverSpec


def render_spec(spec: SolverSpec, console: Console | None = None) -> None:
    console = console or Console()
    console.print(f"Solver: {spec.name}")
    if spec.attrs:
        attrs = Table(title="Attributes")
        attrs.add_column("Key")
        attrs.add_column("Value")
        for key, value in sorted(spec.attrs.items()):
            attrs.add_row(key, value)
        console.print(attrs)
    table = Table(title="Capabilities")
    table.add_column("Capability")
    table.add_column("Supported")
    for capability in Capability:
        table.add_row(capability.value, "yes" if spec.supports(capability) else "no")
    console.print(table)
