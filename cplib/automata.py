"""Aho-Corasick automaton and suffix automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Sequence

_ALPHABET = 26


def _index(c: str) -> int:
    if not "a" <= c <= "z":
        raise ValueError(f"unsupported character {c!r}")
    return ord(c) - ord("a")


class AhoCorasick:
    """Counts occurrences of many lower-case patterns in one pass over a text."""

    __slots__ = ("_trie", "_fail", "_order", "_ends")

    def __init__(self, patterns: Iterable[str]) -> None:
        trie = [[0] * _ALPHABET]
        ends = []
        for pattern in patterns:
            u = 0
            for c in pattern:
                k = _index(c)
                if not trie[u][k]:
                    trie[u][k] = len(trie)
                    trie.append([0] * _ALPHABET)
                u = trie[u][k]
            ends.append(u)
        fail = [0] * len(trie)
        order: list[int] = []
        queue = deque(v for v in trie[0] if v)
        while queue:
            u = queue.popleft()
            order.append(u)
            row, fail_row = trie[u], trie[fail[u]]
            for i in range(_ALPHABET):
                v = row[i]
                if v:
                    fail[v] = fail_row[i]
                    queue.append(v)
                else:
                    row[i] = fail_row[i]
        self._trie = trie
        self._fail = fail
        self._order = order
        self._ends = ends

    def __len__(self) -> int:
        return len(self._ends)

    def count(self, s: str) -> list[int]:
        """Occurrences (overlapping) of each pattern in ``s``, in pattern order."""
        cnt = [0] * len(self._trie)
        u = 0
        for c in s:
            u = self._trie[u][_index(c)]
            if u:
                cnt[u] += 1
        for u in reversed(self._order):
            cnt[self._fail[u]] += cnt[u]
        return [cnt[e] for e in self._ends]


class SuffixAutomaton:
    """The minimal automaton accepting every substring of the text built so far."""

    __slots__ = ("_len", "_link", "_next", "_last")

    def __init__(self, text: Iterable[Hashable] = ()) -> None:
        self._len = [0]
        self._link = [-1]
        self._next: list[dict] = [{}]
        self._last = 0
        for ch in text:
            self.extend(ch)

    def __len__(self) -> int:
        """Number of states, including the initial one."""
        return len(self._len)

    def extend(self, ch: Hashable) -> None:
        """Append one symbol to the text."""
        length, link, nxt = self._len, self._link, self._next
        cur = len(length)
        length.append(length[self._last] + 1)
        link.append(-1)
        nxt.append({})
        p = self._last
        while p != -1 and ch not in nxt[p]:
            nxt[p][ch] = cur
            p = link[p]
        if p == -1:
            link[cur] = 0
        else:
            q = nxt[p][ch]
            if length[p] + 1 == length[q]:
                link[cur] = q
            else:
                clone = len(length)
                length.append(length[p] + 1)
                link.append(link[q])
                nxt.append(dict(nxt[q]))
                while p != -1 and nxt[p].get(ch) == q:
                    nxt[p][ch] = clone
                    p = link[p]
                link[q] = link[cur] = clone
        self._last = cur

    def __contains__(self, sub: Sequence[Hashable]) -> bool:
        """Whether ``sub`` is a substring of the text."""
        state = 0
        for ch in sub:
            state = self._next[state].get(ch, -1)
            if state == -1:
                return False
        return True