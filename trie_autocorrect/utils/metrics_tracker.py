# metrics_tracker.py - running sums/counts per metric key, optionally saved as JSON

import json
import logging
import os
from collections import defaultdict
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class Metrics:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        if self.path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = float(v["sum"])
                self.n[k] = int(v["count"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("ignoring unreadable metrics file %s: %s", self.path, e)

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key: str, val: float):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key: str) -> int:
        return self.n.get(key, 0)

    def avg(self, key: str) -> float:
        cnt = self.n.get(key, 0)
        if cnt == 0:
            return 0.0
        return self.m[key] / cnt

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        """key -> {avg, count} for display."""
        return {k: {"avg": self.avg(k), "count": self.n[k]} for k in sorted(self.m)}
