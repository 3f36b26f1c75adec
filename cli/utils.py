import click
import logging
from typing import List
from clippings.exceptions import SkippedRecord
from clippings.shelf import BookShelf

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> None:
    """Attach a single stream handler (on the current stderr) to the clippings logger."""
    logger = logging.getLogger('clippings')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


class ProgressTracker:
    """Tracks records read, clippings added and records skipped during a run"""

    def __init__(self, verbose: bool = False):
        self.processed = 0
        self.imported = 0
        self.skipped: List[SkippedRecord] = []
        self.verbose = verbose

    def record(self, processed: int, skipped: List[SkippedRecord]):
        """Take the counters from a finished conversion"""
        self.processed = processed
        self.skipped = list(skipped)
        self.imported = processed - len(self.skipped)

    def print_shelf(self, shelf: BookShelf):
        """Print each book with its clipping count"""
        click.echo("\n" + click.style("Books:", fg='blue'))
        for book in shelf:
            click.echo(click.style(f"  {book.title}", fg='cyan') +
                       click.style(f" ({book.author}) ", fg='blue') +
                       click.style(str(len(book.clippings)), fg='green'))

    def print_results(self, item_type: str = 'records'):
        """Print the results of the operation"""
        click.echo("\n" + click.style("Results:", fg='blue'))
        click.echo(click.style("Processed: ", fg='blue') +
                   click.style(str(self.processed), fg='cyan') +
                   click.style(f" {item_type}", fg='blue'))
        click.echo(click.style("Imported: ", fg='blue') +
                   click.style(str(self.imported), fg='green') +
                   click.style(" clippings", fg='blue'))

        if self.skipped and self.verbose:
            click.echo("\n" + click.style("Skipped records:", fg='yellow'))
            for skip_info in self.skipped:
                click.echo("\n" + click.style(f"Line: {skip_info.line_number}", fg='yellow'))
                for line in skip_info.lines:
                    click.echo(click.style(f"  {line}", fg='yellow'))
                click.echo(click.style(f"Reason: {skip_info.reason}", fg='yellow'))
        elif self.skipped:
            click.echo(click.style(f"\nSkipped {len(self.skipped)} records. ", fg='yellow') +
                       click.style("Use --verbose to see details.", fg='blue'))
