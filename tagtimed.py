#!/usr/bin/env python3
'''
  List upcoming TagTime pings.

    $ tagtimed.py                  # next few pings from now
    $ tagtimed.py 1533812000000    # ... from the given epoch milliseconds
    $ tagtimed.py 1533812000000 10 # ... and list 10 of them

  Gap, seed and the default count come from ~/.upatagtimerc (see
  settings.py). Each line has the tick index (epoch ms / 100) of the ping
  and, on the right, its local time. Anyone with the same seed sees the same
  pings, and a smaller gap only ever adds pings, never moves them.
'''

import datetime
import sys

from settings import settings
import util


def usage():
    print("Usage: ./tagtimed.py [start_millis [count]]", file=sys.stderr)
    sys.exit(1)


def parse_args(argv):
    '''Returns (start, count) from the command line, falling back on
    settings for anything not given.'''
    if len(argv) > 3:
        raise ValueError('too many arguments')
    start = int(argv[1]) if len(argv) > 1 else settings.start
    count = int(argv[2]) if len(argv) > 2 else settings.count
    if count < 0:
        raise ValueError('count must be >= 0, got {}'.format(count))
    return start, count


def main(argv=sys.argv):
    try:
        start, count = parse_args(argv)
    except ValueError as e:
        print('ERROR:', e, file=sys.stderr)
        usage()

    s = settings.schedule(start)
    print(util.divider(' {} every {} on average '.format(
        util.splur(count, 'ping'),
        datetime.timedelta(seconds=settings.gap))), file=sys.stderr)

    for t in s.take(count):
        print(util.annotime(str(util.ticks(t)), util.secs(t)))


if __name__ == '__main__':
    main()
