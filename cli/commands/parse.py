import click
from pathlib import Path
from clippings.converter import parse_file
from clippings.exceptions import ClippingsError
from ..utils import ProgressTracker, setup_logging


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--strict/--lenient', default=False, help='Fail on the first malformed record instead of skipping it')
@click.option('--verbose/--no-verbose', default=False, help='Show skipped records and debug logging')
def parse(path: Path, strict: bool, verbose: bool):
    """Parse a clippings export and report what was found

    Example:
        clippings2md parse "My Clippings.txt"
        clippings2md parse "My Clippings.txt" --strict --verbose
    """
    setup_logging(verbose)
    tracker = ProgressTracker(verbose)

    try:
        result = parse_file(path, strict=strict)
    except (ClippingsError, OSError) as e:
        raise click.ClickException(f"Error parsing {path}: {e}")

    tracker.record(result.records_read, result.skipped)
    tracker.print_shelf(result.shelf)
    tracker.print_results()
