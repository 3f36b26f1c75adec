# cli/main.py
import click
from .commands.parse import parse
from .commands.generate import generate

@click.group()
@click.version_option(package_name='clippings2md')
def cli():
    """Kindle clippings to Markdown"""
    pass

cli.add_command(parse)
cli.add_command(generate)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
