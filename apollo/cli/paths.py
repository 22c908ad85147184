"""
Comando paths: muestra las rutas del home de Apollo.

Solo presenta; el cálculo vive en apollo.core.runtime.
"""

from pathlib import PurePath
from typing import List, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from apollo.core.errors import ApolloError
from apollo.core.runtime import apollo_home, apollo_home_bin, describe_layout, resolve_layout
from apollo.core.runtime.layout import LayoutNode

app = typer.Typer(
    name="paths",
    help="Rutas del home de Apollo (~/.apollo)",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _fail(error: ApolloError) -> NoReturn:
    err_console.print(f"[red]✘ {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


def _print_path(path: PurePath) -> None:
    console.print(str(path), soft_wrap=True, markup=False, highlight=False)


def _add_nodes(tree: Tree, nodes: List[LayoutNode]) -> None:
    for name, children in nodes:
        branch = tree.add(name)
        _add_nodes(branch, children)


@app.command()
def home():
    """
    Muestra el directorio home de Apollo

    Ejemplo: ap paths home
    """
    try:
        path = apollo_home()
    except ApolloError as e:
        _fail(e)
    _print_path(path)


@app.command("bin")
def bin_dir():
    """
    Muestra el directorio de binarios de Apollo

    Ejemplo: ap paths bin
    """
    try:
        path = apollo_home_bin()
    except ApolloError as e:
        _fail(e)
    _print_path(path)


@app.command()
def show(
    as_json: bool = typer.Option(False, "--json", help="Salida en JSON"),
):
    """
    Muestra todas las rutas resueltas

    Ejemplos:
        ap paths show          # Tabla
        ap paths show --json   # JSON
    """
    try:
        layout = resolve_layout()
    except ApolloError as e:
        _fail(e)

    if as_json:
        typer.echo(layout.model_dump_json(indent=2))
        return

    table = Table(title="Rutas de Apollo", show_header=True, header_style="bold cyan")
    table.add_column("Ruta", style="cyan")
    table.add_column("Ubicación", style="green", overflow="fold")
    table.add_row("home", str(layout.home))
    table.add_row("bin", str(layout.bin))
    console.print(table)
    console.print("[dim]Las rutas se calculan; no se comprueba que existan[/dim]")


@app.command()
def layout():
    """
    Muestra la estructura documentada bajo el home de Apollo
    """
    try:
        root = apollo_home()
    except ApolloError as e:
        _fail(e)

    console.print(Panel.fit("[bold cyan]Estructura de ~/.apollo[/bold cyan]", border_style="cyan"))
    tree = Tree(f"[bold]{escape(str(root))}[/bold]")
    _add_nodes(tree, describe_layout())
    console.print(tree)
