from __future__ import annotations

import numpy as np


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``a`` into ``b``.

    Rows of the table follow ``b`` and columns follow ``a``; only the
    previous row is kept, and each row is computed as whole-array operations.
    """
    a_len = len(a)
    b_len = len(b)
    if a_len == 0:
        return b_len
    if b_len == 0:
        return a_len

    a_codes = np.fromiter(map(ord, a), dtype=np.int64, count=a_len)
    columns = np.arange(a_len + 1, dtype=np.int64)
    previous = columns.copy()

    for i, char in enumerate(b, start=1):
        substitution = previous[:-1] + (a_codes != ord(char))
        deletion = previous[1:] + 1
        candidates = np.empty(a_len + 1, dtype=np.int64)
        candidates[0] = i
        np.minimum(substitution, deletion, out=candidates[1:])
        # Insertions chain left to right: row[j] = min over k <= j of candidates[k] + (j - k)
        previous = np.minimum.accumulate(candidates - columns) + columns

    return int(previous[a_len])
