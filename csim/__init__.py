from csim.cache import READ, WRITE, AccessEvent, Cache, Outcome, Stats
from csim.geometry import ConfigError, Geometry, validate
from csim.trace import EventError
