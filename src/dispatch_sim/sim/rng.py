# sim/rng.py
"""Named, reproducible random streams.

A stream's draws depend only on (master seed, scenario, name, parts), never on
the order in which streams are first asked for. Traffic multipliers come from
the TRAFFIC stream and the demo request generator from REQUESTS.
"""

from zlib import crc32

import numpy as np

TRAFFIC = "traffic"
REQUESTS = "requests"


def _word(part: object) -> int:
    """Fold an int, str or anything with a stable repr into one u32 entropy word."""
    if isinstance(part, (int, np.integer)):
        return int(part) & 0xFFFFFFFF
    text = part if isinstance(part, str) else repr(part)
    return crc32(text.encode("utf-8")) & 0xFFFFFFFF


class RNGRegistry:
    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _word(int(master_seed))
        self.scenario_tag = _word(str(scenario))
        self._streams: dict[tuple[int, ...], np.random.Generator] = {}

    def entropy(self, name: str, *parts: object) -> tuple[int, ...]:
        return (self.master_seed, self.scenario_tag, _word(name), *(_word(p) for p in parts))

    def substream(self, name: str, *parts: object) -> np.random.Generator:
        """PCG64 generator for name/parts, created on first use and cached after."""
        key = self.entropy(name, *parts)
        gen = self._streams.get(key)
        if gen is None:
            gen = np.random.Generator(np.random.PCG64(np.random.SeedSequence(list(key))))
            self._streams[key] = gen
        return gen

    def stream(self, name: str) -> np.random.Generator:
        return self.substream(name)
