# cplib

A pure-Python library of algorithms and data structures that come up again
and again in programming contests. It has no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `cplib.modint` | `ModInt`, immutable arithmetic modulo 998244353 |
| `cplib.numtheory` | `inv_gcd`, `inv_mod`, `crt`, `qpow`, `safe_sqrt`, `Barrett` |
| `cplib.primes` | linear sieve (`prime_list`, `min_prime_factors`), `segment_primes`, `euler_phi`, `phi_table`, `count_coprime`, Miller–Rabin (`miller_rabin`, `is_prime`), Pollard's rho (`pollard_rho`, `prime_factors`), `divisors_from_factors`, `count_primes`, `min25_sum` |
| `cplib.polynomial` | `fft`, `ntt`, `convolution`, `poly_inv`, `poly_div`, `poly_ln`, `poly_exp`, `poly_multipoint_eval`, `fft_convolution`, `convolution_mod` |
| `cplib.fwt` | `fwt_or`, `fwt_and`, `fwt_xor`, `fwt_convolution` |
| `cplib.rational` | `Rational`, a fraction kept in lowest terms |
| `cplib.linalg` | `gauss_xor` (elimination over GF(2)), `mat_mul`, `Matrix` |
| `cplib.treap` | `Treap`, an ordered set with rank and order statistics |
| `cplib.fhq_treap` | `ImplicitTreap`, a sequence with range reversal |
| `cplib.dsu` | `DSU` and `WeightedDSU` |
| `cplib.fenwick` | `FenwickTree` |
| `cplib.sparse_table` | `SparseTable` for idempotent operations such as `min` and `max` |
| `cplib.wavelet` | `WaveletTree` (k-th smallest, counts of values) |
| `cplib.segtree` | `Monoid`, `Lazy`, `SegTree`, `LazySegTree`, `add_mod_monoid`, `add_mul_lazy`, and ready-made `MAX_INT`, `MIN_INT`, `ADD`, `MIN_COUNT`, `ADD_LAZY` |
| `cplib.maxflow` | `MaxFlow` (Dinic) with `FlowEdge` and `min_cut` |
| `cplib.graphs` | `tarjan_scc`, `bridges`, `dijkstra`, `topo_sort` |
| `cplib.twosat` | `SCCGraph`, `TwoSat` |
| `cplib.stringalgo` | `z_function`, `kmp_find`, `kmp_count`, `manacher`, `suffix_array`, `lcp_array`, `wildcard_match` |
| `cplib.automata` | `AhoCorasick`, `SuffixAutomaton` |
| `cplib.hashing` | `DoubleHash`, `SingleHash`, `SegmentHash`, `strhash`, `poor_hash`, `poor_hash_mod` |
| `cplib.bigint` | `BigInt`, an integer with division and remainder truncating toward zero |
| `cplib.geometry` | `Point`, `Line`, `crossing_point`, `slope`, `make_line`, `dist`, `mid_point`, `angle_of`, `tri_area` |

## Examples

Number theory:

```python
from cplib.numtheory import crt, qpow
from cplib.primes import is_prime

crt([2, 3], [3, 5])         # (8, 15): x = 8 (mod 15)
qpow(2, 10, 1000)           # 24
is_prime(998244353)         # True
```

Disjoint sets:

```python
from cplib.dsu import DSU

d = DSU(5)
d.merge(0, 1)               # True
d.merge(3, 4)               # True
d.same(0, 1)                # True
d.groups()                  # [[0, 1], [2], [3, 4]]
```

Ordered set and segment tree:

```python
from cplib.segtree import ADD, SegTree
from cplib.treap import Treap

t = Treap([5, 1, 3])
t.at(1)                     # 3
t.rank(4)                   # 3 (keys below 4, plus one)
t.lt(3)                     # 1

seg = SegTree(ADD, [1, 2, 3, 4])
seg.query(1, 3)             # 5
```

Maximum flow:

```python
from cplib.maxflow import MaxFlow

mf = MaxFlow(3)
mf.add_edge(0, 1, 2)
mf.add_edge(1, 2, 1)
mf.flow(0, 2)               # 1
```

Strings:

```python
from cplib.stringalgo import suffix_array, z_function

suffix_array("banana")      # [5, 3, 1, 0, 4, 2]
z_function("aaaa")          # [0, 3, 2, 1]
```

Range queries use half-open intervals `[l, r)` with indices starting at 0,
as in Python slicing. Invalid arguments raise `ValueError`, `IndexError` or
`ZeroDivisionError` rather than returning sentinel values.

## What it does not do

The package is a library only: it has no command-line program and reads no
input files. It has no lowest-common-ancestor structure and no heavy-light
decomposition of trees; tree path queries have to be built from the pieces
above. It also has no calendar helpers, no inversion-counting sort, no
simulated annealing and no generators of adversarial test data.

## Running the tests

The tests use pytest and live in `tests/`, one file per module. Install the
`test` extra and run `pytest` from the project root.