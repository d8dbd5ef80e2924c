# =========================================================================
# SEEDED RANDOM SOURCE
# Linear congruential generator so a seed reproduces the same puzzle.
# =========================================================================

MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280


class SeededRandom:
    """
    Small deterministic random source.

    Exposes the subset of the `random` module API the generator and the
    carver need (random, randrange, shuffle), so either can be passed in.
    """

    def __init__(self, seed=1):
        self.seed = seed
        self.state = seed % MODULUS

    def random(self):
        """Returns the next float in [0, 1)."""
        self.state = (self.state * MULTIPLIER + INCREMENT) % MODULUS
        return self.state / MODULUS

    def randrange(self, stop):
        """Returns an integer in [0, stop)."""
        if stop <= 0:
            raise ValueError(f"randrange() needs a positive bound, got {stop}")
        return int(self.random() * stop)

    def shuffle(self, items):
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self.random() * (i + 1))
            items[i], items[j] = items[j], items[i]
