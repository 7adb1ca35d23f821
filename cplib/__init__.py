"""Algorithms and data structures for competitive programming: number theory,
polynomials, trees, graphs, strings and hashing."""

__version__ = "0.1.0"

__all__ = [
    "automata",
    "bigint",
    "dsu",
    "fenwick",
    "fhq_treap",
    "fwt",
    "geometry",
    "graphs",
    "hashing",
    "linalg",
    "maxflow",
    "modint",
    "numtheory",
    "polynomial",
    "primes",
    "rational",
    "segtree",
    "sparse_table",
    "stringalgo",
    "treap",
    "twosat",
    "wavelet",
]