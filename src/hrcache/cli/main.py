"""Main entry point for the hrcache CLI."""

import logging
import re

import click

from hrcache import __version__
from hrcache.cache import CacheDuration, KeyedTTLCache, Pattern, create_cache_key
from hrcache.cli.output import RichOutput, format_duration_ms, setup_logging
from hrcache.utils.config_parser import AppConfig, load_config
from hrcache.utils.exceptions import ConfigError
from hrcache.utils.logger import LoggingConfiguration

logger = logging.getLogger(__name__)
output = RichOutput()


def _parse_params(params):
    parsed = {}
    for param in params:
        name, sep, value = param.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {param!r}", param_hint="PARAMS")
        parsed[name] = value
    return parsed


@click.group()
@click.version_option(version=__version__, prog_name="hrcache")
@click.option("--config", "config_path", default=None, help="Path to a JSON configuration file.")
@click.option(
    "--log-config",
    "log_config_path",
    default=None,
    help="Path to a YAML logging configuration. Overrides the logging section of --config.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v, -vv). Ignored when --log-config or --config is given.",
)
@click.pass_context
def cli(ctx, config_path, log_config_path, verbose):
    """Developer tools for the HR client response cache."""
    ctx.ensure_object(dict)

    app_config = AppConfig()
    if config_path:
        try:
            app_config = load_config(config_path)
        except (FileNotFoundError, ConfigError) as e:
            output.error(str(e))
            ctx.exit(1)

    if log_config_path:
        LoggingConfiguration.setup_logging(log_config_path, app_config.logging.level.upper())
    elif config_path:
        LoggingConfiguration.from_config(app_config.logging)
    else:
        setup_logging(verbose)

    ctx.obj["config"] = app_config


@cli.command()
@click.argument("endpoint")
@click.argument("params", nargs=-1)
def key(endpoint, params):
    """Print the cache key for ENDPOINT with NAME=VALUE query PARAMS."""
    click.echo(create_cache_key(endpoint, _parse_params(params)))


@cli.command()
@click.pass_context
def durations(ctx):
    """Show the conventional cache durations."""
    default = ctx.obj["config"].cache.default_duration_ms
    rows = [
        (name, value, format_duration_ms(value), "yes" if value == default else "")
        for name, value in CacheDuration.as_dict().items()
    ]
    output.table("Cache durations", ["Preset", "Milliseconds", "Duration", "Default"], rows)


@cli.command()
@click.argument("pattern")
@click.argument("keys", nargs=-1, required=True)
@click.option("-i", "--ignore-case", is_flag=True, help="Match case-insensitively.")
@click.pass_context
def match(ctx, pattern, keys, ignore_case):
    """Show which KEYS an invalidation PATTERN would remove."""
    selector = Pattern.compile(pattern, re.IGNORECASE if ignore_case else 0)
    if selector.error is not None:
        output.warning(str(selector.error))

    cache = KeyedTTLCache.from_config(ctx.obj["config"].cache)
    for k in keys:
        cache.set(k, True)
    cache.invalidate(selector)

    remaining = set(cache.get_stats()["keys"])
    rows = [(k, "removed" if k not in remaining else "kept") for k in keys]
    output.table(f"Pattern {selector}", ["Key", "Result"], rows)
    logger.debug(f"{len(set(keys) - remaining)} of {len(set(keys))} keys matched {selector}")


def main():
    """Main entry point function."""
    cli(prog_name="hrcache")


if __name__ == "__main__":
    main()
