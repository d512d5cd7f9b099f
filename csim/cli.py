import click

from csim.cache import Cache
from csim.config import DEFAULT_CONFIG, read_config
from csim.geometry import ConfigError, validate
from csim.report import HEADER, format_config, format_outcome, format_summary
from csim.trace import read_events


def resolve_geometry(config_path, sets=None, assoc=None, line_size=None):
    fields = (sets, assoc, line_size)
    if None in fields:
        fields = tuple(given if given is not None else read
                       for given, read in zip(fields, read_config(config_path)))
    return validate(*fields)


def run(geometry, lines):
    click.echo(format_config(geometry))
    click.echo()
    cache = Cache(geometry)
    click.echo(HEADER)
    for event in read_events(lines):
        click.echo(format_outcome(cache.process(event)))
    click.echo()
    click.echo(format_summary(cache.stats()))


@click.command()
@click.option('-c', '--config', 'config_path', default=DEFAULT_CONFIG, show_default=True,
              help='Cache configuration file (sets, set size, line size)')
@click.option('-s', '--sets', type=int, help='Number of sets, overrides the config file')
@click.option('-E', '--assoc', type=int, help='Associativity (lines per set), overrides the config file')
@click.option('-b', '--line-size', type=int, help='Line size in bytes, overrides the config file')
@click.argument('trace_file', type=click.File('r'), default='-')
def main(config_path, sets, assoc, line_size, trace_file):
    """Replay TRACE_FILE (stdin by default) through a write-through,
    no-write-allocate LRU cache."""
    try:
        geometry = resolve_geometry(config_path, sets, assoc, line_size)
    except ConfigError as e:
        raise click.ClickException(str(e))
    run(geometry, trace_file)


if __name__ == '__main__':
    main()
