from hyperloglog.errors import PrecisionOutOfRange
from hyperloglog.hash import hash_bytes, hash_string
from hyperloglog.settings import DEFAULT_PRECISION, MAX_PRECISION, MIN_PRECISION
from hyperloglog.sketch import HyperLogLog, rho
