import click
from pathlib import Path
from clippings.config import DEFAULT_OUTPUT_DIR
from clippings.converter import generate as generate_markdown
from clippings.exceptions import ClippingsError
from ..utils import ProgressTracker, setup_logging


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output-dir', default=DEFAULT_OUTPUT_DIR, type=click.Path(file_okay=False, path_type=Path),
              help='Directory to write the Markdown files to')
@click.option('--strict/--lenient', default=False, help='Fail on the first malformed record instead of skipping it')
@click.option('--verbose/--no-verbose', default=False, help='Show skipped records and debug logging')
def generate(path: Path, output_dir: Path, strict: bool, verbose: bool):
    """Convert a clippings export into one Markdown file per book

    Writes <Title>.md for every book plus index.md and summary.md.

    Example:
        clippings2md generate "My Clippings.txt"
        clippings2md generate "My Clippings.txt" --output-dir book/clipping
    """
    setup_logging(verbose)
    tracker = ProgressTracker(verbose)

    try:
        result = generate_markdown(path, output_dir, strict=strict)
    except (ClippingsError, OSError) as e:
        raise click.ClickException(f"Error generating from {path}: {e}")

    tracker.record(result.records_read, result.skipped)
    tracker.print_results()
    click.echo(click.style("\nWrote ", fg='blue') +
               click.style(str(len(result.shelf)), fg='cyan') +
               click.style(" books to ", fg='blue') +
               click.style(str(output_dir), fg='cyan'))
