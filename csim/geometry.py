from collections import namedtuple

ADDRESS_BITS = 32
MAX_SETS = 8192
MAX_ASSOCIATIVITY = 8
MIN_LINE_SIZE = 8
MAX_LINE_SIZE = 64


class ConfigError(Exception):
    pass


class Geometry(namedtuple(
        'Geometry', 'num_sets associativity line_size offset_bits index_bits')):
    __slots__ = ()

    @property
    def tag_bits(self):
        return ADDRESS_BITS - self.offset_bits - self.index_bits

    @property
    def total_size(self):
        return self.num_sets * self.associativity * self.line_size


def log2_int(n):
    bits = 0
    while n > 1:
        n >>= 1
        bits += 1
    return bits


def _is_power_of_two(n):
    return n & (n - 1) == 0


def validate(num_sets: int, associativity: int, line_size: int) -> Geometry:
    """Check raw cache parameters and derive the address bit fields.

    Raises ConfigError on the first parameter that is out of range.
    """
    if not 0 < num_sets <= MAX_SETS:
        raise ConfigError(
            'Number of sets must be 1-{}'.format(MAX_SETS))
    if not 0 < associativity <= MAX_ASSOCIATIVITY:
        raise ConfigError(
            'Associativity must be 1-{}'.format(MAX_ASSOCIATIVITY))
    if not MIN_LINE_SIZE <= line_size <= MAX_LINE_SIZE:
        raise ConfigError('Line size must be {}-{} bytes'.format(
            MIN_LINE_SIZE, MAX_LINE_SIZE))
    if not _is_power_of_two(num_sets):
        raise ConfigError('Number of sets must be a power of 2')
    if not _is_power_of_two(line_size):
        raise ConfigError('Line size must be a power of 2')

    offset_bits = log2_int(line_size)
    index_bits = log2_int(num_sets)
    if offset_bits + index_bits > ADDRESS_BITS:
        raise ConfigError('Offset and index bits exceed {}-bit addresses'.format(
            ADDRESS_BITS))
    return Geometry(num_sets, associativity, line_size, offset_bits, index_bits)
