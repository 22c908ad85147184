"""
Aplicación CLI de Apollo (ap).

Solo compone submódulos y comandos; la lógica vive en apollo.core.
"""

from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from apollo.cli.paths import app as paths_app

try:
    VERSION = package_version("apollo-home")
except PackageNotFoundError:
    # Ejecución desde el árbol fuente sin instalar
    VERSION = "desconocida"

app = typer.Typer(
    name="ap",
    help="Apollo - CLI para el home de Apollo (~/.apollo)",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

app.add_typer(paths_app, name="paths", help="Rutas del home de Apollo")


@app.callback()
def _load_env():
    """Apollo - CLI para el home de Apollo (~/.apollo)"""
    # .env del directorio actual; no pisa variables ya definidas
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)


@app.command()
def version():
    """Muestra la versión de Apollo"""
    console.print(Panel.fit(
        "[bold cyan]Apollo (ap)[/bold cyan]\n"
        "[dim]Rutas del home de Apollo[/dim]\n\n"
        f"[bold]Versión:[/bold] {VERSION}\n"
        "[bold]Home:[/bold] ~/.apollo",
        border_style="cyan"
    ))


@app.command()
def info():
    """Muestra información sobre Apollo"""
    console.print(Panel.fit("[bold cyan]Apollo - Información[/bold cyan]", border_style="cyan"))
    table = Table(title="Comandos Disponibles", show_header=True, header_style="bold cyan")
    table.add_column("Comando", style="cyan", width=15)
    table.add_column("Descripción", style="green")
    table.add_column("Subcomandos", style="yellow")
    table.add_row("paths", "Rutas del home de Apollo", "home, bin, show, layout")
    console.print(table)
    console.print("\n[dim]Usa 'ap <comando> --help' para ver comandos específicos[/dim]")


def main():
    app()
