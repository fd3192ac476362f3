import logging
import os

import click
from rich.logging import RichHandler

from .constants import DEFAULT_CONFIG_FILE, DEFAULT_PATH_TEMPLATE
from .core import ConfigAppender
from .errors import ConfAppenderError
from .services.config_loader import ConfigLoader, validate_path_template


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


def _check_path_template(_ctx, _param, value):
    if value is None:
        return None
    try:
        return validate_path_template(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.argument("version", required=False)
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option(
    "--path-template",
    required=False,
    callback=_check_path_template,
    help=f"Target file template; '{{version}}' is replaced (default: {DEFAULT_PATH_TEMPLATE}).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=None,
    help="Print the target file and settings block without writing anything.",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
@click.option(
    "--manifest-file",
    required=False,
    type=click.Path(),
    help="Write a JSON record of the run to this path.",
)
def main(version, config, path_template, dry_run, verbose, log_file, manifest_file):
    """Append test-server and ZomboDB settings to a PostgreSQL cluster's postgresql.conf.

    VERSION is the PostgreSQL major version (e.g. 14) used to locate the file.
    """
    logger = logging.getLogger("pgconfappender")

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except ConfAppenderError as exc:
        raise click.ClickException(str(exc)) from exc

    version = _resolve_option(version, config_values, "version")
    path_template = _resolve_option(
        path_template, config_values, "path_template", default=DEFAULT_PATH_TEMPLATE
    )
    dry_run = _resolve_option(dry_run, config_values, "dry_run", default=False)
    verbose = _resolve_option(verbose, config_values, "verbose", default=False)
    log_file = _resolve_option(log_file, config_values, "log_file")
    manifest_file = _resolve_option(manifest_file, config_values, "manifest_file")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    appender = ConfigAppender(
        version=version,
        path_template=path_template,
        dry_run=dry_run,
        manifest_file=manifest_file,
    )

    raise SystemExit(appender.run())


if __name__ == "__main__":
    main()
