"""CLI entrypoint: Typer app definition and command registration"""

import typer

from leypub.cli.commands import build_cmd, check_cmd


app = typer.Typer(name="leypub", no_args_is_help=True, help="Ley document to HTML publishing")

app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
