# UI.py
"""""Terminal user interface for TreeCalc.

Commands
--------
- eval: evaluate one expression and print the formatted result
- tree: show the tokens and the expression tree the engine builds
- repl: read expressions line by line until an empty line / exit / EOF

Responsibilities
----------------
- Load the settings via config_manager and let flags override them
- Hand the expression to MathEngine and render the result
- Show MathEngine errors as "Error <code>: <message>" on stderr
- Optional clipboard copy of the printed result

Expressions starting with '-' must follow '--', e.g. `treecalc eval -- -5`,
or the shell parser reads them as options.
"""""

from typing import Optional

import pyperclip
import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager
from . import MathEngine as MathEngine

app = typer.Typer(
    name="treecalc",
    help="Evaluate '+ - * /' expressions through a binary expression tree",
    no_args_is_help=True,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

EMPTY_LABEL = "∅ (0)"


def show_error(error_obj):
    """Print a MathError the way the calculator reports it: code, message, details."""
    error_code = error_obj.code
    category = E.Error_Dictionary.get(error_code[:1], "Error")
    err_console.print(f"[bold red]{category}[/bold red]")
    err_console.print(f"[red]Error {error_code}: {escape(E.ERROR_MESSAGES.get(error_code, 'Unknown error'))}[/red]")
    err_console.print(f"Details: {escape(str(error_obj.message))}")
    if error_obj.equation is not None:
        err_console.print(f"Equation: {escape(str(error_obj.equation))}")


def load_settings():
    try:
        return config_manager.load_setting_value("all")
    except E.ConfigurationError as e:
        show_error(e)
        raise typer.Exit(1)


def render_tree(node, parent=None):
    """Convert a BinaryNode tree into a rich Tree."""
    if node.is_leaf():
        label = escape(node.value) if node.value != "" else f"[dim]{EMPTY_LABEL}[/dim]"
    else:
        label = f"[bold cyan]{escape(node.value)}[/bold cyan]"

    branch = Tree(label) if parent is None else parent.add(label)
    if node.left is not None:
        render_tree(node.left, branch)
    if node.right is not None:
        render_tree(node.right, branch)
    return branch


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '1+2*3'"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Print the plain float instead of the formatted result"),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the printed result to the clipboard"),
    trim: Optional[bool] = typer.Option(None, "--trim/--no-trim", help="Drop a trailing operator first (default from config.json)"),
) -> None:
    """Evaluate an expression and print the result."""
    settings = load_settings()
    if trim is not None:
        settings["trim_trailing_operator"] = trim

    try:
        if raw:
            problem = expression
            if settings["trim_trailing_operator"]:
                problem = MathEngine.trim_trailing_operator(problem)
            output = repr(MathEngine.Expression(problem, debug_output=settings["debug"]).evaluation())
        else:
            output = MathEngine.calculate(expression, settings)
    except RecursionError:
        show_error(MathEngine.too_deep_error(expression))
        raise typer.Exit(1)
    except E.MathError as e:
        if e.equation is None:
            e.equation = expression
        show_error(e)
        raise typer.Exit(1)

    console.print(output, markup=False)

    if copy:
        try:
            pyperclip.copy(output)
        except pyperclip.PyperclipException as e:
            show_error(E.MathError(str(e), code="4001", equation=expression))
            raise typer.Exit(1)


@app.command("tree")
def cmd_tree(
    expression: str = typer.Argument(help="Expression, e.g. '8-3-2'"),
) -> None:
    """Show the tokens and the expression tree without evaluating."""
    try:
        parsed = MathEngine.Expression(expression, debug_output=False)
        rendered = render_tree(parsed.root)
    except RecursionError:
        show_error(MathEngine.too_deep_error(expression))
        raise typer.Exit(1)

    console.print(f"Tokens: {list(parsed.tokens)}", markup=False)
    console.print(rendered)


@app.command("repl")
def cmd_repl() -> None:
    """Read expressions line by line; an empty line, 'exit' or 'quit' ends it."""
    settings = load_settings()

    while True:
        try:
            problem = console.input("> ")
        except EOFError:
            break

        if problem.strip() in ("", "exit", "quit"):
            break

        try:
            console.print(MathEngine.calculate(problem, settings), markup=False)
        except E.MathError as e:
            show_error(e)


def main():
    # --- Main Application Entry Point ---
    app()


if __name__ == "__main__":
    main()
