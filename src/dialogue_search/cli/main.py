"""Main CLI entry point for dialogue search."""

import sys

import click

from dialogue_search import __version__
from dialogue_search.cli.errors import (
    EXIT_SUCCESS,
    EXIT_ERROR,
    EXIT_INVALID_ARGS,
    EXIT_NOT_FOUND,
    DialogueSearchError,
    InvalidArgumentError,
    ResourceNotFoundError,
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """dlg: Search a dialogue (Q&A) knowledge base"""
    pass


@cli.command('search')
@click.option('--question', '-q', help='Question text (a keyword with --keyword)')
@click.option('--answer', '-a', help='Answer text (a keyword with --keyword)')
@click.option('--keyword', '-k', is_flag=True, help='Use keyword matching instead of exact matching')
@click.option('--page', type=click.IntRange(min=1), default=1, help='Page of the results to show')
@click.option('--auto-merge', is_flag=True, help='Merge keyword results with identical questions or answers')
@click.option('--recursive', '-r', is_flag=True, help='Resolve redirected answers')
@click.option('--data', 'data_path', type=click.Path(), help='Dialogue data file (YAML)')
@click.option('--config', 'config_path', type=click.Path(), help='Config file (YAML)')
@click.option('--items-per-page', type=click.IntRange(min=1), help='Results per page (default: 20)')
@click.option('--merge-threshold', type=click.IntRange(min=0), help='Largest merged group listed by id (default: 5)')
@click.option('--max-answer-length', type=click.IntRange(min=1), help='Answer truncation length (default: 100)')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--debug', is_flag=True, help='Debug mode (show lookups and redirects)')
def search(question, answer, keyword, page, auto_merge, recursive, data_path, config_path,
           items_per_page, merge_threshold, max_answer_length, output_json, verbose, debug):
    """Search existing dialogues

    \b
    Examples:
      dlg search -q hi
      dlg search -q hel -k --auto-merge
      dlg search -q hi --recursive --page 2
    """
    from dialogue_search.cli.search import search_command
    search_command(question, answer, keyword, page, auto_merge, recursive, data_path, config_path,
                   items_per_page, merge_threshold, max_answer_length, output_json, verbose, debug)


def main():
    """Main CLI entry point with structured error handling."""
    try:
        cli()
        return EXIT_SUCCESS
    except click.ClickException as e:
        # Click handles its own exceptions (usage errors, etc.)
        e.show()
        return EXIT_INVALID_ARGS
    except (InvalidArgumentError, click.BadParameter) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID_ARGS
    except ResourceNotFoundError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except KeyboardInterrupt:
        print("\n[INFO] Operation cancelled by user", file=sys.stderr)
        return EXIT_ERROR
    except DialogueSearchError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        print(f"[ERROR] Unexpected error: {e}", file=sys.stderr)
        if '--verbose' in sys.argv or '-v' in sys.argv:
            import traceback
            traceback.print_exc()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
