"""Main CLI entry point."""

import logging
from pathlib import Path
from typing import Optional

import rich.panel
import rich_click as click
from hamlgen import __version__
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.STYLE_COMMANDS_TABLE_SHOW_LINES = False
click.rich_click.STYLE_COMMANDS_TABLE_PAD_EDGE = False
click.rich_click.STYLE_COMMANDS_TABLE_BOX = None
click.rich_click.STYLE_OPTIONS_TABLE_EXPAND = False
click.rich_click.STYLE_COMMANDS_TABLE_HEADER = "bold magenta"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'hamlgen --help' for more information."
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.STYLE_COMMANDS_PANEL_BOX = None
click.rich_click.STYLE_OPTIONS_PANEL_BOX = None

# Cyan theme
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.OPTION_GROUPS = {
    "hamlgen compile": [
        {
            "name": "Output",
            "options": ["--output", "--fragment", "--function-name"],
        },
        {
            "name": "Compiler Options",
            "options": ["--format", "--escape-html", "--escape-attributes"],
        },
    ]
}

click.rich_click.COMMAND_GROUPS = {
    "hamlgen": [
        {
            "name": "Commands",
            "commands": ["compile", "types"],
        }
    ]
}


# Workaround: rich-click wraps tables in Panels which default to expand=True.
original_panel_init = rich.panel.Panel.__init__


def panel_init(self, *args, **kwargs):
    kwargs.setdefault("expand", False)
    original_panel_init(self, *args, **kwargs)


rich.panel.Panel.__init__ = panel_init  # type: ignore[method-assign]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
    )


@click.group(
    help=f"""
[bold white on cyan] hamlgen [/] [bold cyan]v{__version__}[/] Compile template trees to Python.

Run [bold cyan]hamlgen compile TREE[/] to turn a JSON node tree into a render module.
"""
)
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    _configure_logging(verbose)


@cli.command("compile")
@click.argument("tree", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write generated code here instead of stdout.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["xhtml", "html4", "html5"]),
    default="html5",
    show_default=True,
    help="Output document format.",
)
@click.option(
    "--escape-html/--no-escape-html",
    default=True,
    show_default=True,
    help="Escape the values of output expressions.",
)
@click.option(
    "--escape-attributes/--no-escape-attributes",
    default=True,
    show_default=True,
    help="Escape static attribute values.",
)
@click.option(
    "--fragment",
    is_flag=True,
    help="Emit only the render statements, without the module wrapper.",
)
@click.option(
    "--function-name",
    default="render",
    show_default=True,
    help="Name of the generated render function.",
)
def compile_(
    tree: Path,
    output: Optional[Path],
    output_format: str,
    escape_html: bool,
    escape_attributes: bool,
    fragment: bool,
    function_name: str,
) -> None:
    """Compile a JSON node tree into Python source."""
    from hamlgen.compiler.compiler import Compiler
    from hamlgen.compiler.exceptions import HamlgenError
    from hamlgen.compiler.options import CompilerOptions

    if not function_name.isidentifier():
        raise click.BadParameter(
            f"'{function_name}' is not a valid Python identifier",
            param_hint="--function-name",
        )

    compiler = Compiler(
        CompilerOptions(
            escape_html=escape_html,
            escape_attributes=escape_attributes,
            format=output_format,
        )
    )
    try:
        root = compiler.load(tree, module=not fragment)
        if fragment:
            source = compiler.render(root)
        else:
            source = compiler.compile_module(root, function_name=function_name)
    except HamlgenError as e:
        err_console.print(
            f"[bold red]error:[/] {escape(str(e))}", highlight=False, soft_wrap=True
        )
        raise SystemExit(1)

    if output is None:
        click.echo(source, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(source, encoding="utf-8")
    err_console.print(f"✅ Wrote [cyan]{escape(str(output))}[/]")


@cli.command()
def types() -> None:
    """List the node types accepted in tree files."""
    from hamlgen.compiler.nodes import NODE_TYPES

    table = Table(show_header=True, header_style="bold magenta", box=None)
    table.add_column("type")
    table.add_column("description")
    for name, node_class in NODE_TYPES.items():
        doc = (node_class.__doc__ or "").strip().splitlines()
        table.add_row(name, doc[0] if doc else "")
    console.print(table)


if __name__ == "__main__":
    cli()
