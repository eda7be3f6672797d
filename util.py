# Utility functions for tagtime.
# This uses settings from ~/.upatagtimerc so that must have been loaded first.

import datetime
import time

import rand
from settings import settings

linelen = settings.linelen

def ticks(ms):
    '''Tick index (100ms units) of an epoch-millisecond timestamp.'''
    return ms // rand.TICK

def secs(ms):
    '''Epoch milliseconds to unixtime in seconds, as used by the time module.'''
    return ms / 1000

def splur(n, noun):
    '''Singular or Plural:	Pluralize the given noun properly, if n is not 1.
    Eg: splur(3, "boy") -> "3 boys"'''
    return '{n} {noun}{end}'.format(
        n=n, noun=noun, end='' if n == 1 else 's')

def divider(label, ll=linelen):
    '''Takes a string "foo" and returns "-----foo-----" of length ll.'''
    n = len(label)
    left = (ll - n) // 2
    right = ll - left - n
    return ('-' * left) + label + ('-' * right)

def lrjust(a, b, x=linelen):
    '''Takes 2 strings and returns them concatenated with enough space in
    the middle so the whole string is x long (default: linelen).'''
    return '{a}{spaces}{b}'.format(
        a=a, spaces=' ' * max(0, x - len(a) - len(b)), b=b)

def annotime(a, t, ll=linelen):
    '''Annotates a line of text with the given timestamp (unixtime).'''
    tt = datetime.datetime.fromtimestamp(t).timetuple()
    candidates = [
        "[%Y-%m-%d %H:%M:%S %a]",   # 24 chars
        "[%m.%d %H:%M:%S %a]",      # 18 chars
        "[%d %H:%M:%S %a]",         # 15 chars
        "[%m.%d %H:%M:%S]",         # 14 chars
        "[%H:%M:%S %a]",            # 12 chars
        "[%m.%d %H:%M]",            # 11 chars
        "[%H:%M %a]",               #  9 chars
        "[%H:%M:%S]",               #  8 chars
        "[%H:%M]",                  #  5 chars
        "[%M]"                      #  2 chars
    ]

    for candidate_format in candidates:
        candidate = time.strftime(candidate_format, tt)
        if len(candidate) + len(a) + 1 <= ll:
            return lrjust(a, candidate, ll)
    return a
