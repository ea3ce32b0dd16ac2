# distance.py
# Levenshtein edit distance (insert/delete/substitute, each cost 1).
# Two rolling rows keep memory at O(len(b)); an optional cutoff lets
# fuzzy lookups stop as soon as a pair can no longer qualify.

from typing import Optional


def levenshtein(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Edit distance between `a` and `b`.

    With `max_dist` set, returns `max_dist + 1` as soon as the distance is
    known to exceed it (length gap too big, or a whole DP row above it).
    Whether the true distance is <= max_dist is never changed by the cutoff.
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m
    if a == b:
        return 0

    if max_dist is not None and abs(m - n) > max_dist:
        return max_dist + 1

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        ca = a[i - 1]
        curr[0] = i
        row_min = i
        for j in range(1, n + 1):
            if ca == b[j - 1]:
                val = prev[j - 1]
            else:
                ins = curr[j - 1] + 1
                delete = prev[j] + 1
                replace = prev[j - 1] + 1
                val = min(ins, delete, replace)
            curr[j] = val
            if val < row_min:
                row_min = val

        if max_dist is not None and row_min > max_dist:
            return max_dist + 1
        prev, curr = curr, prev

    return prev[n]
