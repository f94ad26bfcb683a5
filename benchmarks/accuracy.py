import hashlib
import random
import time

from hyperloglog import HyperLogLog, hash_bytes

PRECISION = 18


def random_values(n: int, rng: random.Random) -> int:
    hll = HyperLogLog(PRECISION)
    for _ in range(n):
        hll.add(rng.getrandbits(64))
    return hll.count()


def hashed_values(n: int, rng: random.Random) -> int:
    hll = HyperLogLog(PRECISION)
    for _ in range(n):
        hll.add(hash_bytes(hashlib.sha1, rng.getrandbits(96).to_bytes(12, "little")))
    return hll.count()


def report(name: str, n: int, fn, rng: random.Random):
    start = time.time()
    estimate = fn(n, rng)
    error = abs(estimate - n) / n
    print(
        f"{name:<8} n={n:<10} estimate={estimate:<10} "
        f"error={error * 100:.3f}% time={time.time() - start:.1f}s"
    )


if __name__ == "__main__":
    rng = random.Random(2019)
    for n in [2_000_000, 10_000_000]:
        report("random", n, random_values, rng)
    for n in [1_000_000, 2_000_000]:
        report("sha1", n, hashed_values, rng)
