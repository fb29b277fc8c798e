"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpress.cli.commands import convert_cmd, main_callback, preview_cmd


app = typer.Typer(name="mdpress", no_args_is_help=True, help="Markdown to HTML post converter")

app.callback()(main_callback)
app.command(name="convert")(convert_cmd)
app.command(name="preview")(preview_cmd)
