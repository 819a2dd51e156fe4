# Main CLI entry point for extsort

import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from .utils.logger import setup_logging, get_logger
from .utils.validator import get_validator, ValidationError
from .category_mapper import CategoryMapper, CATCH_ALL_CATEGORY
from .file_manager import FileManager, FileOutcome, OrganizationResult, OutcomeStatus


# Version information
__version__ = "1.0.0"
__app_name__ = "extsort"

CONTEXT_SETTINGS = dict(help_option_names=['--help', '-h', '-H'])


class OrganizeConfig:
    """Options of one organize run"""
    def __init__(self):
        self.verbose = False
        self.show_progress = False
        self.show_summary = False
        self.log_dir = None
        self.use_current = False
        self.raw_path = None


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument('paths', nargs=-1, metavar='[FOLDER_PATH]')
@click.option('--current', '-c', '-C', is_flag=True,
              help='Organize files in the current working directory.')
@click.option('--verbose', '-v', is_flag=True, help='Print every moved file and enable debug logging.')
@click.option('--progress', '-p', is_flag=True, help='Show a progress bar while organizing.')
@click.option('--summary', '-s', is_flag=True, help='Print a per-category summary when done.')
@click.option('--list-categories', is_flag=True, help='Show the category folders and their extensions.')
@click.option('--log-dir', type=click.Path(file_okay=False, dir_okay=True),
              help='Also write a log file into this directory.')
@click.version_option(__version__, prog_name=__app_name__)
@click.pass_context
def cli(ctx, paths, current, verbose, progress, summary, list_categories, log_dir):
    """
    Organizes files in the specified folder into subdirectories based on file type.

    \b
    Examples:
        organize ~/Downloads
        organize "C:\\Users\\me\\Desktop"
        organize -c
    """
    config = OrganizeConfig()
    config.verbose = verbose
    config.show_progress = progress
    config.show_summary = summary
    config.log_dir = log_dir
    config.use_current = current
    config.raw_path = paths[0] if paths else None

    logger = setup_logging(verbose=config.verbose, log_dir=config.log_dir)

    category_mapper = CategoryMapper()

    if list_categories:
        _display_categories(category_mapper)
        return

    if not config.use_current and config.raw_path is None:
        click.echo(ctx.get_help())
        return

    if len(paths) > 1:
        logger.debug(f"Ignoring extra arguments: {' '.join(paths[1:])}")
    if config.use_current and config.raw_path is not None:
        logger.debug(f"--current given, ignoring path argument: {config.raw_path}")

    ctx.exit(_run_organize(config, category_mapper))


def _run_organize(config: OrganizeConfig, category_mapper: CategoryMapper) -> int:
    """Validate the target, run one organize pass and report; returns the exit code"""
    logger = get_logger()
    validator = get_validator()

    try:
        target = validator.resolve_target_directory('--current' if config.use_current else config.raw_path)
    except ValidationError as e:
        logger.debug(f"Path validation failed: {e}")
        click.echo(f"Error: {e}", err=True)
        return 1

    self_path = validator.resolve_self_path()
    exclude_paths = [logger.log_file] if logger.log_file else []
    file_manager = FileManager(category_mapper, self_path, exclude_paths)

    click.echo(f"Organizing files in '{target}'...")

    result = file_manager.organize_by_type(
        target,
        progress_callback=lambda outcome: _report_outcome(outcome, config.verbose),
        show_progress=config.show_progress
    )

    if not result.success:
        click.echo(f"An unexpected error occurred: {result.fatal_error}", err=True)
        return 1

    if config.show_summary:
        _display_results(result)

    click.echo("File organization complete.")
    return 0


def _report_outcome(outcome: FileOutcome, verbose: bool):
    """One console line per skipped or failed file, and per move when verbose"""
    if outcome.status == OutcomeStatus.SKIPPED:
        click.echo(outcome.message)
    elif outcome.status == OutcomeStatus.FAILED:
        click.echo(outcome.message, err=True)
    elif verbose:
        click.echo(f"📁 {outcome.name} → {outcome.category}")


def _display_categories(category_mapper: CategoryMapper):
    """Print the category table"""
    table = Table(title="Category folders")
    table.add_column("Folder", style="bold cyan")
    table.add_column("Extensions")

    for category, extensions in category_mapper.get_all_categories().items():
        if category == CATCH_ALL_CATEGORY:
            table.add_row(category, "(anything not listed above)")
        else:
            table.add_row(category, ", ".join(extensions))

    Console().print(table)


def _display_results(result: OrganizationResult):
    """Print a per-category summary of the pass"""
    summary = result.get_summary()

    table = Table(title="Organization results")
    table.add_column("Category", style="bold")
    table.add_column("Moved", justify="right")

    for category, count in summary['processed_categories'].items():
        table.add_row(category, str(count))

    console = Console()
    console.print(table)
    console.print(f"Moved: {summary['processed_files']}  "
                  f"Skipped: {summary['skipped_files']}  "
                  f"Errors: {summary['error_files']}  "
                  f"Folders created: {summary['categories_created']}  "
                  f"Time: {summary['operation_time']}s")


def main(argv: Optional[Tuple[str, ...]] = None):
    """Main entry point"""
    try:
        exit_code = cli.main(args=argv, prog_name="organize", standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("\n⏹️  Operation cancelled by user", err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\n⏹️  Operation cancelled by user", err=True)
        sys.exit(1)
    except Exception as e:
        get_logger().debug(f"Unexpected error: {e!r}")
        click.echo(f"An unexpected error occurred: {e}", err=True)
        sys.exit(1)

    sys.exit(exit_code or 0)


if __name__ == '__main__':
    main()
