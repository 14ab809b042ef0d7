"""
Display utilities using Rich library for beautiful terminal output
"""
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from advisor_cli.models import HealthResponse

console = Console()


def show_header(title: str):
    """Display a header panel"""
    console.print(Panel(f"[bold cyan]{title}[/bold cyan]", expand=False))


def show_error(message: str):
    """Display error message"""
    console.print(f"[bold red]Error:[/bold red] {message}")


def show_info(message: str):
    """Display info message"""
    console.print(f"[cyan]{message}[/cyan]")


def show_reply(text: str, is_error: bool = False):
    """Render an assistant reply; model output is Markdown"""
    if is_error:
        console.print(f"\n[yellow]{text}[/yellow]")
        return
    console.print("\n[bold green]Advisor:[/bold green]")
    console.print(Markdown(text))


def display_health(health: HealthResponse, turn_count: int = 0):
    """Display server health as a formatted table, plus the local conversation size"""
    table = Table(title="Server", show_header=True, header_style="bold magenta")
    table.add_column("Status", style="green")
    table.add_column("Timestamp", style="dim")
    table.add_column("Prompt styles", style="cyan")
    table.add_column("Features", style="yellow")

    table.add_row(
        health.status,
        health.timestamp,
        ", ".join(health.prompt_styles),
        ", ".join(health.features),
    )

    console.print(table)
    console.print(f"[dim]{turn_count} messages in this conversation[/dim]")
