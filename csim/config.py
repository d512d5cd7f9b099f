import re

from csim.geometry import ConfigError, validate

DEFAULT_CONFIG = 'trace.config'

_CONFIG_RE = re.compile(
    r'Number of sets:\s*([+-]?\d+)\s*'
    r'Set size:\s*([+-]?\d+)\s*'
    r'Line size:\s*([+-]?\d+)')


def parse_config(text):
    """Return (num_sets, associativity, line_size), or None if malformed."""
    match = _CONFIG_RE.match(text)
    if not match:
        return None
    return tuple(int(field) for field in match.groups())


def read_config(path=DEFAULT_CONFIG):
    try:
        with open(path, mode='r') as f:
            text = f.read()
    except OSError:
        raise ConfigError('Cannot open {} file'.format(path))
    fields = parse_config(text)
    if fields is None:
        raise ConfigError('Invalid {} format'.format(path))
    return fields


def load_config(path=DEFAULT_CONFIG):
    return validate(*read_config(path))
