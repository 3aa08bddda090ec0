import json
import logging
from pathlib import Path

import click

from .config import AnatomyView, ExportConfig, OutputFormat
from .export import ComponentExporter, ExportError


@click.command()
@click.option("--format", "-f", "output_format", default=None, type=click.Choice([f.value for f in OutputFormat]))
@click.option("--anatomy-view", "-a", default=None, type=click.Choice([v.value for v in AnatomyView]))
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--split",
    is_flag=True,
    default=False,
    help="Write one Markdown file per component into the OUTPUT directory",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def anatomy_export(output_format, anatomy_view, config, split, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e

    if config is not None:
        with open(config, encoding="utf-8") as f:
            try:
                config = ExportConfig.from_dict(json.load(f))
            except ValueError as e:
                raise click.ClickException(f"Invalid config {config}: {e}") from e
    else:
        config = ExportConfig()

    # CLI options override the config file
    if output_format is not None:
        config.output_format = OutputFormat(output_format)
    if anatomy_view is not None:
        config.anatomy_view = AnatomyView(anatomy_view)

    try:
        exporter = ComponentExporter(data, config)
        if split:
            if output is None:
                raise click.UsageError("--split requires an OUTPUT directory")
            out_dir = Path(output)
            out_dir.mkdir(parents=True, exist_ok=True)
            for filename, document in exporter.split_markdown():
                (out_dir / filename).write_text(document, encoding="utf-8")
            return

        out = exporter.export()
    except ExportError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(out, nl=not out.endswith("\n"))
    else:
        with open(output, "w", encoding="utf-8") as f:
            f.write(out)
