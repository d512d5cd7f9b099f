from collections import namedtuple

from csim.geometry import Geometry

READ = 'R'
WRITE = 'W'

AccessEvent = namedtuple('AccessEvent', 'kind size address')

Outcome = namedtuple(
    'Outcome', 'kind address tag index offset hit mem_refs')


class Stats(namedtuple('Stats', 'hits misses mem_reads mem_writes')):
    __slots__ = ()

    @property
    def accesses(self):
        return self.hits + self.misses

    @property
    def mem_refs(self):
        return self.mem_reads + self.mem_writes

    @property
    def hit_rate(self):
        return 100.0 * self.hits / self.accesses if self.accesses else 0.0

    @property
    def miss_rate(self):
        return 100.0 * self.misses / self.accesses if self.accesses else 0.0


class Set:
    def __init__(self, lines):
        self.lines = tuple(lines)


class Line:
    def __init__(self, valid=False, tag=0, recency=0):
        self.valid = valid
        self.tag = tag
        self.recency = recency

    def __repr__(self):
        return 'Line(valid={}, tag={:#x}, recency={})'.format(
            self.valid, self.tag, self.recency)


class Cache:
    """Write-through, no-write-allocate cache with LRU replacement.

    Recency is kept as a dense rank per set: the most recently used valid
    line holds ``associativity - 1`` and older lines hold smaller values.
    """

    def __init__(self, geometry: Geometry):
        self.geometry = geometry
        sets = []
        for _ in range(geometry.num_sets):
            sets.append(Set(Line() for _ in range(geometry.associativity)))
        self.sets = tuple(sets)
        self._hits = 0
        self._misses = 0
        self._mem_reads = 0
        self._mem_writes = 0

    def decompose(self, address):
        g = self.geometry
        offset = address & (g.line_size - 1)
        index = (address >> g.offset_bits) & (g.num_sets - 1)
        tag = address >> (g.offset_bits + g.index_bits)
        return tag, index, offset

    def lookup(self, cache_set, tag):
        for way, line in enumerate(cache_set.lines):
            if line.valid and line.tag == tag:
                return way
        return None

    def touch_lru(self, cache_set, way):
        touched = cache_set.lines[way]
        prior = touched.recency
        for line in cache_set.lines:
            if line.valid and line.recency > prior:
                line.recency -= 1
        touched.recency = self.geometry.associativity - 1

    def select_victim(self, cache_set):
        for way, line in enumerate(cache_set.lines):
            if not line.valid:
                return way
        victim = 0
        for way, line in enumerate(cache_set.lines):
            if line.recency < cache_set.lines[victim].recency:
                victim = way
        return victim

    def process(self, event: AccessEvent) -> Outcome:
        tag, index, offset = self.decompose(event.address)
        cache_set = self.sets[index]
        way = self.lookup(cache_set, tag)
        hit = way is not None

        if event.kind == WRITE:
            # write-through: every write reaches memory, misses allocate nothing
            self._mem_writes += 1
            mem_refs = 1
            if hit:
                self._hits += 1
                self.touch_lru(cache_set, way)
            else:
                self._misses += 1
        else:
            if hit:
                self._hits += 1
                self.touch_lru(cache_set, way)
                mem_refs = 0
            else:
                self._misses += 1
                self._mem_reads += 1
                way = self.select_victim(cache_set)
                victim = cache_set.lines[way]
                victim.valid = True
                victim.tag = tag
                self.touch_lru(cache_set, way)
                mem_refs = 1

        return Outcome(event.kind, event.address, tag, index, offset, hit,
                       mem_refs)

    def stats(self) -> Stats:
        return Stats(self._hits, self._misses, self._mem_reads,
                     self._mem_writes)
