"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from doccompare.cli.commands import compare_cmd, parse_cmd, summary_cmd


app = typer.Typer(name="doccompare", no_args_is_help=True, help="Line-by-line document comparison")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level, e.g. DEBUG")] = None,
    ):
    """Compare .txt, .md, .docx and .pdf documents line by line."""
    ctx.obj = {"log_level": log_level}


app.command(name="compare")(compare_cmd)
app.command(name="summary")(summary_cmd)
app.command(name="parse")(parse_cmd)
