"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdxname.cli.commands import analyze_cmd, export_cmd, sample_cmd


app = typer.Typer(name="mdxname", no_args_is_help=True, help="Name MDX files after their canonical URL")

app.command(name="analyze")(analyze_cmd)
app.command(name="export")(export_cmd)
app.command(name="sample")(sample_cmd)
