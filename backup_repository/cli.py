"""Command-line interface for the backup repository."""

import json
import logging
import sys
import click
from typing import Optional

from .config.config_manager import ConfigManager
from .core.repository import BackupsRepository
from .exceptions import BackupNotFoundError, StorageAccessError
from .utils.formatters import format_date, get_age_indicator


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries exported backup content
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _get_repository(ctx) -> BackupsRepository:
    config_manager = ConfigManager(ctx.obj.get('config_path'))
    config_manager.load_config()

    # Logging section applies unless overridden on the command line
    if ctx.obj.get('log_level') is None:
        logging_config = config_manager.get_logging_config()
        setup_logging(logging_config['level'], ctx.obj.get('log_file') or logging_config['file'])

    return config_manager.create_repository()


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file',
              help='Log file path')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Backup Repository - Manage configuration backup archives."""
    ctx.ensure_object(dict)
    setup_logging(log_level or 'WARNING', log_file)
    ctx.obj['config_path'] = config_path
    ctx.obj['log_level'] = log_level
    ctx.obj['log_file'] = log_file


@cli.command('list')
@click.option('--output', '-o', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.pass_context
def list_backups(ctx, output: str):
    """List backup files in the backup directory."""
    try:
        repository = _get_repository(ctx)
        backups = repository.list_backups()

        entries = []
        for backup in backups:
            try:
                created_at = repository.get_created_at(backup.filename)
            except BackupNotFoundError:
                # Deleted after the listing
                created_at = None
            entries.append((backup, created_at))

        entries.sort(key=lambda entry: entry[0].filename)

        if output == 'json':
            json_results = [{
                'filename': backup.filename,
                'path': backup.path,
                'created_at': created_at.isoformat() if created_at else None
            } for backup, created_at in entries]
            click.echo(json.dumps(json_results, indent=2))
            return

        click.echo(f"Backups in {repository.configuration_backup_path()}")
        click.echo("=" * 50)

        if not entries:
            click.echo("No backup files found")
            return

        for backup, created_at in entries:
            created_str = format_date(created_at) if created_at else "-"
            click.echo(f"{get_age_indicator(created_at)}  {backup.filename}  {created_str}")

        click.echo(f"\n{len(entries)} backup file(s)")

    except (StorageAccessError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error listing backups: {e}", err=True)
        sys.exit(1)


@cli.command('created-at')
@click.argument('filename')
@click.pass_context
def created_at(ctx, filename: str):
    """Show when a backup file was created."""
    try:
        repository = _get_repository(ctx)
        click.echo(repository.get_created_at(filename).isoformat())

    except (StorageAccessError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error reading creation time: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('filename')
@click.option('--yes', '-y', is_flag=True, help='Delete without asking for confirmation')
@click.pass_context
def delete(ctx, filename: str, yes: bool):
    """Delete a backup file."""
    try:
        repository = _get_repository(ctx)

        if not repository.backup_exists(filename):
            click.echo(f"Backup file {filename} does not exist, nothing to delete")
            return

        if not yes:
            click.confirm(f"Delete backup file {filename}?", abort=True)

        repository.delete_backup(filename)
        click.echo(f"✅ Deleted {filename}")

    except (StorageAccessError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error deleting backup: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('filename')
@click.option('--output', '-o', default='-',
              help='Destination file, "-" for stdout')
@click.pass_context
def export(ctx, filename: str, output: str):
    """Write the raw content of a backup file."""
    try:
        repository = _get_repository(ctx)
        content = repository.read_backup_content(filename)

        with click.open_file(output, 'wb') as f:
            f.write(content)

        if output != '-':
            click.echo(f"✅ Exported {filename} to {output} ({len(content)} bytes)")

    except (StorageAccessError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error exporting backup: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def path(ctx):
    """Show the configured backup directory."""
    try:
        click.echo(_get_repository(ctx).configuration_backup_path())

    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)


@cli.command('validate-config')
@click.pass_context
def validate_config(ctx):
    """Validate configuration file."""
    try:
        config_manager = ConfigManager(ctx.obj.get('config_path'))
        config_manager.load_config()

        click.echo("✅ Configuration loaded successfully")

        backups_config = config_manager.get_backups_config()
        logging_config = config_manager.get_logging_config()

        click.echo(f"\n📊 Configuration Summary:")
        click.echo(f"   Backup directory: {backups_config['directory']}")
        click.echo(f"   Validate filenames: {'yes' if backups_config['validate_filenames'] else 'no'}")
        click.echo(f"   Log level: {logging_config['level']}")

    except (FileNotFoundError, ValueError) as e:
        click.echo(f"❌ Configuration validation failed: {e}", err=True)
        sys.exit(1)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
