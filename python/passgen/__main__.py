"""
CLI interface for passgen.
"""

import sys
import logging
from typing import List

import click

from .exceptions import ValidationError, EntropySourceError
from .generator import PasswordGenerator
from .utils.validation import (
    DEFAULT_LENGTH,
    DEFAULT_COUNT,
    validate_length,
    validate_count,
    get_length_error_message,
    get_count_error_message,
)


EXCLUDED_DISPLAY = "0, O, I, l, 1"


def print_banner(length: int, count: int, charset_info: str) -> None:
    """Print the summary shown above generated passwords."""
    plural = "s" if count > 1 else ""
    click.echo(f"Generated password{plural}:")
    click.echo(f"Length: {length} characters")
    click.echo(f"Character sets: {charset_info}")
    click.echo(f"Excluded similar characters: {EXCLUDED_DISPLAY}")
    click.echo()


def copy_to_clipboard(passwords: List[str]) -> None:
    """Copy generated passwords to the clipboard, one per line."""
    try:
        import pyperclip
        pyperclip.copy("\n".join(passwords))
        noun = "password" if len(passwords) == 1 else "passwords"
        click.echo(f"🔐 Generated {noun} copied to clipboard.", err=True)
    except ImportError:
        click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
    except Exception as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--length", "-l", default=DEFAULT_LENGTH, type=int,
              help=f"Password length (default: {DEFAULT_LENGTH})")
@click.option("--special", "-s", is_flag=True, help="Include special characters")
@click.option("--count", "-c", default=DEFAULT_COUNT, type=int,
              help=f"Number of passwords to generate (default: {DEFAULT_COUNT})")
@click.option("--copy", is_flag=True, help="Copy generated passwords to clipboard")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(length: int, special: bool, count: int, copy: bool, verbose: bool) -> None:
    """Generate random passwords without visually similar characters.

    \b
    Examples:
      passgen                 # Generate 12-character password
      passgen -l 16 -s        # Generate 16-character password with special chars
      passgen -l 10 -c 5      # Generate 5 passwords of 10 characters each
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Validate caller-facing limits before touching the generator
    if not validate_length(length):
        click.echo(f"Error: {get_length_error_message(length)}", err=True)
        sys.exit(1)

    if not validate_count(count):
        click.echo(f"Error: {get_count_error_message(count)}", err=True)
        sys.exit(1)

    if not validate_length(length, special):
        click.echo(f"Error: {get_length_error_message(length, special)}", err=True)
        sys.exit(1)

    generator = PasswordGenerator()
    print_banner(length, count, generator.get_charset_info(special))

    passwords = []
    for i in range(count):
        try:
            password = generator.generate(length, special)
        except ValidationError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        except EntropySourceError as e:
            click.echo(f"Error generating password: {e}", err=True)
            sys.exit(1)

        click.echo(f"{i + 1}: {password}")
        passwords.append(password)

    if copy:
        copy_to_clipboard(passwords)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
