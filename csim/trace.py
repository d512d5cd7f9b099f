import re

import click

from csim.cache import READ, WRITE, AccessEvent
from csim.geometry import ADDRESS_BITS

ACCESS_SIZES = (1, 2, 4, 8)

_LINE_RE = re.compile(
    r'([RrWw]):\s*([+-]?\d+):\s*(?:0[xX])?([0-9a-fA-F]+)')


class EventError(Exception):
    pass


def parse_line(line):
    """Parse one ``<kind>:<size>:<hex address>`` trace line.

    Returns None for lines that do not look like an access at all, and
    raises EventError for accesses the cache must not see.
    """
    match = _LINE_RE.match(line)
    if not match:
        return None
    kind, size, address = match.groups()
    kind = READ if kind.upper() == READ else WRITE
    size = int(size)
    address = int(address, 16)

    if size not in ACCESS_SIZES:
        raise EventError('Invalid access size {}, skipping'.format(size))
    if address >> ADDRESS_BITS:
        raise EventError('Address 0x{:x} out of range, skipping'.format(address))
    if address & (size - 1):
        raise EventError('Misaligned access at 0x{:x}, skipping'.format(address))
    return AccessEvent(kind, size, address)


def read_events(lines):
    for line in lines:
        try:
            event = parse_line(line)
        except EventError as e:
            click.echo('Warning: {}'.format(e), err=True)
            continue
        if event is not None:
            yield event
