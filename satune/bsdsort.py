"""In-place introsort (quicksort with heapsort fallback) and heapsort."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

Comparator = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _heapsort(a: MutableSequence[Any], lo: int, n: int, cmp: Comparator) -> None:
    if n <= 1:
        return
    # Heap positions are numbered 1..n; position i lives at a[lo + i - 1].
    base = lo - 1

    def create(par_i: int, count: int) -> None:
        child_i = par_i * 2
        while child_i <= count:
            if child_i < count and cmp(a[base + child_i], a[base + child_i + 1]) < 0:
                child_i += 1
            if cmp(a[base + child_i], a[base + par_i]) <= 0:
                break
            a[base + par_i], a[base + child_i] = a[base + child_i], a[base + par_i]
            par_i = child_i
            child_i = par_i * 2

    for start in range(n // 2, 0, -1):
        create(start, n)

    while n > 1:
        k = a[base + n]
        a[base + n] = a[base + 1]
        n -= 1
        par_i = 1
        child_i = 2
        while child_i <= n:
            if child_i < n and cmp(a[base + child_i], a[base + child_i + 1]) < 0:
                child_i += 1
            a[base + par_i] = a[base + child_i]
            par_i = child_i
            child_i = par_i * 2
        while True:
            child_i = par_i
            par_i = child_i // 2
            if child_i == 1 or cmp(k, a[base + par_i]) < 0:
                a[base + child_i] = k
                break
            a[base + child_i] = a[base + par_i]


def heapsort(items: MutableSequence[Any], cmp: Optional[Comparator] = None) -> None:
    """Sort ``items`` in place with heapsort using the three-way ``cmp``."""
    _heapsort(items, 0, len(items), cmp or _natural)


def _med3(a: MutableSequence[Any], i: int, j: int, k: int, cmp: Comparator) -> int:
    if cmp(a[i], a[j]) < 0:
        if cmp(a[j], a[k]) < 0:
            return j
        return k if cmp(a[i], a[k]) < 0 else i
    if cmp(a[j], a[k]) > 0:
        return j
    return i if cmp(a[i], a[k]) < 0 else k


def _swap(a: MutableSequence[Any], i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]


def _vecswap(a: MutableSequence[Any], i: int, j: int, n: int) -> None:
    for offset in range(n):
        _swap(a, i + offset, j + offset)


def _introsort(
    a: MutableSequence[Any], lo: int, n: int, maxdepth: int, cmp: Comparator
) -> None:
    while True:
        if n < 7:
            for pm in range(lo + 1, lo + n):
                pl = pm
                while pl > lo and cmp(a[pl - 1], a[pl]) > 0:
                    _swap(a, pl, pl - 1)
                    pl -= 1
            return
        if maxdepth == 0:
            _heapsort(a, lo, n, cmp)
            return
        maxdepth -= 1

        pm = lo + n // 2
        if n > 7:
            pl = lo
            pn = lo + n - 1
            if n > 40:
                s = n // 8
                pl = _med3(a, pl, pl + s, pl + 2 * s, cmp)
                pm = _med3(a, pm - s, pm, pm + s, cmp)
                pn = _med3(a, pn - 2 * s, pn - s, pn, cmp)
            pm = _med3(a, pl, pm, pn, cmp)
        _swap(a, lo, pm)

        pa = pb = lo + 1
        pc = pd = lo + n - 1
        while True:
            while pb <= pc:
                result = cmp(a[pb], a[lo])
                if result > 0:
                    break
                if result == 0:
                    _swap(a, pa, pb)
                    pa += 1
                pb += 1
            while pb <= pc:
                result = cmp(a[pc], a[lo])
                if result < 0:
                    break
                if result == 0:
                    _swap(a, pc, pd)
                    pd -= 1
                pc -= 1
            if pb > pc:
                break
            _swap(a, pb, pc)
            pb += 1
            pc -= 1

        pn = lo + n
        r = min(pa - lo, pb - pa)
        _vecswap(a, lo, pb - r, r)
        r = min(pd - pc, pn - pd - 1)
        _vecswap(a, pb, pn - r, r)

        r = pb - pa
        s = pd - pc
        if r < s:
            if s <= 1:
                return
            if r > 1:
                _introsort(a, lo, r, maxdepth, cmp)
            lo = pn - s
            n = s
        else:
            if r <= 1:
                return
            if s > 1:
                _introsort(a, pn - s, s, maxdepth, cmp)
            n = r


def sort(items: MutableSequence[Any], cmp: Optional[Comparator] = None) -> None:
    """Sort ``items`` in place with introsort using the three-way ``cmp``.

    Recursion depth is bounded by about ``2 * lg(n + 1)``; beyond that the
    remaining partition is finished with heapsort.
    """
    n = len(items)
    _introsort(items, 0, n, n.bit_length() * 2, cmp or _natural)