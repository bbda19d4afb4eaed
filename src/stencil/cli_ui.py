"""
Rich terminal output for the stencil CLI.

Styled status lines, the value review table, and ConsoleReporter, the
Reporter the CLI injects into the core.
"""

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from stencil.core.init_impl.verify import VerificationReport
from stencil.core.values import VALUE_KEYS, PlaceholderValues

console = Console()
err_console = Console(stderr=True)

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "highlight": Style(color="bright_cyan"),
    "token": Style(color="yellow", bold=True),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


class ConsoleReporter:
    """Reporter that renders progress with the styles above."""

    def info(self, message: str) -> None:
        print_info(message)

    def success(self, message: str) -> None:
        print_success(message)

    def warn(self, message: str) -> None:
        print_warning(message)

    def error(self, message: str) -> None:
        print_error(message)


def ask(label: str, default: str = "") -> str:
    """Prompt for a value; a blank answer returns the default."""
    prompt = Text(label, style=STYLES["info"])
    if default:
        prompt.append(f" ({default})", style=STYLES["highlight"])
    prompt.append(": ")

    response = console.input(prompt).strip()
    return response or default


def confirm(message: str, default: bool = True) -> bool:
    """Ask for confirmation with Y/n prompt."""
    suffix = " [Y/n]" if default else " [y/N]"
    prompt = Text(message + suffix + " ", style=STYLES["info"])

    try:
        response = console.input(prompt).strip().lower()

        if not response:
            return default

        return response in ("y", "yes")

    except (KeyboardInterrupt, EOFError):
        console.print()
        return False


def display_values_table(values: PlaceholderValues, title: str = "Review your selections") -> None:
    """Display the assembled values (non-interactive)."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan", title=title)
    table.add_column("Key", style="white bold")
    table.add_column("Value", style="bright_black")

    camel = values.as_dict()
    fields = PlaceholderValues.model_fields
    for key in VALUE_KEYS:
        alias = fields[key].alias or key
        table.add_row(alias, camel[alias] or "(empty)")

    console.print(table)
    console.print()


def display_issues(report: VerificationReport) -> None:
    """Print placeholder issues grouped by file."""
    grouped = report.issues_by_file()
    if not grouped:
        return

    print_error(f"Found {len(grouped)} file(s) with placeholders:")
    console.print()
    for file, issues in grouped.items():
        console.print(Text(f"✗ {file}", style=STYLES["highlight"]))
        for issue in issues:
            line = Text(f"  Line {issue.line_number}: ")
            line.append(issue.matched_token, style=STYLES["token"])
            console.print(line)
            console.print(Text(f"    {issue.line_excerpt}", style=STYLES["muted"]))
        console.print()
