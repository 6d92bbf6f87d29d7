from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .constraints.result import ComparisonResult

console = Console()


def render_result(result: ComparisonResult) -> Text:
    """Build the status line for a comparison result."""
    if result.succeeded:
        status = Text(" PASSED ", style="bold white on green")
    else:
        status = Text(" FAILED ", style="bold white on red")

    line = Text()
    line.append_text(status)
    line.append(" ")
    line.append("equal to ", style="dim")
    line.append(result.description, style="bold")
    return line


def print_result(result: ComparisonResult, target: Console | None = None) -> None:
    """Print a comparison result, with the failure message for failures."""
    target = target or console
    target.print(render_result(result))
    if not result.succeeded:
        # Plain Text so brackets in values are not parsed as markup
        target.print(Panel(Text(result.failure_message().rstrip("\n")), border_style="red", expand=False))
