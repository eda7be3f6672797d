#!/usr/bin/env python3

import rand

import os

SETTINGS_FILE = '.upatagtimerc'
SETTINGS_PATH = os.path.expanduser(os.path.join('~', SETTINGS_FILE))
# plain python, eg a file containing just "gap = 60 * 60"

DEFAULTS = {
    'gap': rand.GAP,  # Average number of seconds between pings
                      # (eg, 60*60 = 1 hour).

    'seed': rand.SEED,  # For pings not in sync with others,
                        # change this (NB: > 0).

    # Constants of the generator. Everyone who wants to share pings has to
    # agree on these, so leave them alone.
    'multiplier': rand.IA,
    'modulus': rand.IM,

    'start': None,    # Epoch milliseconds to list pings from (None: now).

    'count': 5,       # How many pings tagtimed.py lists.

    'linelen': 79,    # Try to keep output lines at most this long.
}

def import_from_path(path, namespace=None):
    globals = {} if namespace is None else namespace
    with open(path, 'r') as f:
        contents = f.read()
    exec(contents, globals)
    return globals

class Settings:

    @staticmethod
    def get_default_namespace(defaults=DEFAULTS):
        return dict(defaults)

    def lcg(self):
        return rand.LCG(multiplier=self.multiplier, modulus=self.modulus,
                        seed=self.seed)

    def schedule(self, time=None):
        '''A fresh ping schedule starting at time (epoch ms), or at the
        configured start, or now.'''
        if time is None:
            time = self.start
        return rand.Schedule(time=time, gap=self.gap, lcg=self.lcg())

    def __init__(self, srcpath=SETTINGS_PATH, defaults=DEFAULTS):
        self._srcpath = srcpath
        namespace = self.get_default_namespace(defaults)
        if os.path.exists(self._srcpath):
            namespace = import_from_path(self._srcpath, namespace)
        self._dict = namespace

    def __getattr__(self, key):
        if key and key[0] != '_' and key in self._dict:
            return self._dict[key]
        raise AttributeError('no such attribute {}'.format(key))

if __name__ != '__main__':
    settings = Settings()
