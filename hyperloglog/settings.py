# alpha(m) = 0.7213 / (1 + 1.079 / m) only holds for m >= 128
MIN_PRECISION = 7
MAX_PRECISION = 18

# 16kB of registers, ~0.8% standard error
DEFAULT_PRECISION = 14
