HEADER = ('Type Address  Tag      Index Offset Result MemRefs\n'
          '---- -------- -------- ----- ------ ------ -------')


def format_config(geometry):
    return '\n'.join([
        'Cache Simulator Configuration',
        '==============================',
        'Number of sets:    {}'.format(geometry.num_sets),
        'Set associativity: {}'.format(geometry.associativity),
        'Line size:         {} bytes'.format(geometry.line_size),
        'Total cache size:  {} bytes'.format(geometry.total_size),
    ])


def format_outcome(outcome):
    return '{} {:08x} {:x} {:x} {:x} {} {}'.format(
        outcome.kind, outcome.address, outcome.tag, outcome.index,
        outcome.offset, 'hit ' if outcome.hit else 'miss', outcome.mem_refs)


def format_summary(stats):
    return '\n'.join([
        'Simulation Summary Statistics',
        '==============================',
        'Total accesses:    {}'.format(stats.accesses),
        'Hits:              {}'.format(stats.hits),
        'Misses:            {}'.format(stats.misses),
        'Hit rate:          {:.2f}%'.format(stats.hit_rate),
        'Miss rate:         {:.2f}%'.format(stats.miss_rate),
        'Memory reads:      {}'.format(stats.mem_reads),
        'Memory writes:     {}'.format(stats.mem_writes),
        'Total memory refs: {}'.format(stats.mem_refs),
    ])
