'''
The "universal ping algorithm" for deciding when to next ping the user.

Time is cut into ticks of 100ms. Tick t is a ping iff the generator's value at
tick t is below a threshold derived from the desired average gap. The value at
a tick depends only on the tick, never on how we got there, so for two gaps
a < b the pings for a are a superset of the pings for b.
'''

import time as _time

IA = 3125         # multiplier of the generator
IM = 34359738337  # modulus of the generator
GAP = 45 * 60     # default average number of seconds between pings
SEED = 20180809   # default state of the generator

TICK = 100        # milliseconds per tick
TICKS_PER_SEC = 1000 // TICK


def now_millis():
    return int(_time.time() * 1000)


class LCG:
    '''A linear congruential generator whose increment is 0.'''

    def __init__(self, multiplier=IA, modulus=IM, seed=SEED):
        if multiplier <= 0:
            raise ValueError('multiplier must be > 0, got {}'.format(multiplier))
        if modulus <= 0:
            raise ValueError('modulus must be > 0, got {}'.format(modulus))
        self.multiplier = multiplier
        self.modulus = modulus
        self.seed = seed % modulus
        self.state = self.seed

    def advance_by(self, n):
        '''Move the state forward n steps in O(log n) and return it.

        Same result as calling advance_one() n times.
        '''
        if n < 0:
            raise ValueError("can't advance by a negative count ({})".format(n))
        self.state = pow(self.multiplier, n, self.modulus) \
            * self.state % self.modulus
        return self.state

    def advance_one(self):
        return self.advance_by(1)

    def reset(self):
        self.state = self.seed

    def copy(self):
        other = LCG(self.multiplier, self.modulus, self.seed)
        other.state = self.state
        return other

    def __eq__(self, other):
        if not isinstance(other, LCG):
            return NotImplemented
        return (self.multiplier, self.modulus, self.state) == \
            (other.multiplier, other.modulus, other.state)

    def __repr__(self):
        return 'LCG(multiplier={}, modulus={}, state={})'.format(
            self.multiplier, self.modulus, self.state)


class Schedule:
    '''An endless iterator over ping times, in epoch milliseconds.

    time is the last ping handed out (or the starting point), gap the
    desired average number of seconds between pings.
    '''

    def __init__(self, time=None, gap=GAP, lcg=None):
        if gap <= 0:
            raise ValueError('gap must be > 0, got {}'.format(gap))
        self.time = now_millis() if time is None else int(time)
        self.gap = gap
        self.lcg = LCG() if lcg is None else lcg

    @classmethod
    def from_millis(cls, n, gap=GAP, lcg=None):
        return cls(time=n, gap=gap, lcg=lcg)

    @property
    def tick(self):
        return self.time // TICK

    @property
    def threshold(self):
        return self.lcg.modulus // (self.gap * TICKS_PER_SEC)

    def copy(self):
        return Schedule(self.time, self.gap, self.lcg.copy())

    def advance_to_next(self, cur):
        '''Set self.time to the first ping strictly after tick of cur.

        A cur earlier than self.time is ignored, so we never hand out a
        ping before one that's already been committed.
        '''
        if cur < self.time:
            return
        threshold = self.threshold

        prev_ticks = self.time // TICK
        cur_ticks = cur // TICK
        new_ticks = cur_ticks + 1

        # Ticks between prev and cur are skipped over, never checked.
        if cur_ticks > prev_ticks:
            self.lcg.advance_by(cur_ticks - prev_ticks)

        while self.lcg.advance_one() >= threshold:
            new_ticks += 1

        self.time = new_ticks * TICK

    def __iter__(self):
        return self

    def __next__(self):
        self.advance_to_next(self.time)
        return self.time

    nextping = __next__

    def take(self, n):
        '''Returns a list of the next n pings.'''
        if n < 0:
            raise ValueError("can't take a negative number of pings")
        return [next(self) for _ in range(n)]

    def nth(self, n):
        '''Returns the nth upcoming ping (counting from 0), consuming it and
        all the ones before it.'''
        if n < 0:
            raise ValueError('n must be >= 0, got {}'.format(n))
        for _ in range(n):
            next(self)
        return next(self)

    def pings_until(self, end):
        '''Yields the upcoming pings up to and including time end.

        The first ping after end is computed on a copy and thrown away, so
        afterwards self.time is the last ping yielded.
        '''
        while True:
            probe = self.copy()
            t = next(probe)
            if t > end:
                return
            self.time, self.lcg = probe.time, probe.lcg
            yield t

    def __repr__(self):
        return 'Schedule(time={}, gap={}, lcg={!r})'.format(
            self.time, self.gap, self.lcg)
