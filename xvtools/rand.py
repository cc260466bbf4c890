"""Park and Miller minimal standard pseudo-random numbers."""


def do_rand(ctx):
    """Next value after state ``ctx``; the value is also the new state.

    Results lie in [0, 0x7ffffffd].
    """
    x = (ctx & ((1 << 64) - 1)) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class ParkMiller:
    """A generator holding its own state."""

    def __init__(self, seed=1):
        self.state = seed

    def next(self):
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        while True:
            yield self.next()