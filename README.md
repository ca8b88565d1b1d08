# satune

Building blocks for compiling constraint problems over booleans,
finite-domain elements and orders: collections, encoding records, decoding of
element values from a SAT model, and the declaration text that SMT-LIB and
Alloy solvers need.

## Modules

- `satune.hashtable.HashTable`: linear-probing table with a power-of-two
  capacity, pluggable `hash_function` and `equals`, `None` allowed as a key,
  `put`, `get`, `remove`, `contains`, `resize`, `reset`, `random_value` and
  `items`.
- `satune.hashset.HashSet`: insertion-ordered set built on `HashTable`, with
  `add`, `add_all`, `get` (returns the stored equal key), `remove`, `first`,
  `random_element` and `copy`. The current element may be removed while
  iterating.
- `satune.vector.Vector`: growable array with a tracked capacity that
  doubles on `push`; `set_size`, `set_expand`, `insert_at`, `remove_at`,
  `last`, `pop` and `clear`.
- `satune.bsdsort`: `sort` (introsort that falls back to heapsort) and
  `heapsort`, both in place and driven by an optional three-way `cmp`.
- `satune.structhash`: `mix_hash`, `pair_hash` and `tunable_setting_hash`,
  32-bit hashes for composite keys.
- `satune.edge.BooleanEdge`: a reference to a boolean node with a negation
  flag; equal only for the same node and polarity.
- `satune.elementencoding`: `ElementEncodingType`, `ElemEnc`, `next_pow2` and
  `ElementEncoding`, which lays out an element's range in an encoding array
  with an in-use bitmap.
- `satune.encodings`: `FunctionEncoding`, `OrderEncoding`, their type enums,
  and the abstract `OrderResolver`.
- `satune.sattranslator`: `element_value` and the per-encoding readers
  (`element_value_one_hot`, `element_value_unary`,
  `element_value_binary_index`, `element_value_binary_value`). Each takes an
  `ElementEncoding` and a function that tells whether a variable is true.
  An assignment that names no valid value raises `UndefinedValueWarning`.
- `satune.serializer.Serializer`: buffered binary file writer and context
  manager that remembers, by identity, which objects were written.
- `satune.signature`: abstract `Signature` and `ValuedSignature`; a signature
  joins with strings through `+`.
- `satune.smtsig`: `SMTBoolSig`, `SMTSetSig`, `SMTElementSig` produce
  SMT-LIB `declare-const` lines and range constraints.
- `satune.alloysig`: `AlloyBoolSig`, `AlloySetSig`, `AlloyElementSig`
  produce Alloy signatures; an `AlloyAbstracts` shared between them makes
  each abstract signature appear only once.

## Examples

```python
from satune.bsdsort import sort
from satune.elementencoding import ElementEncoding, ElementEncodingType
from satune.sattranslator import element_value
from satune.smtsig import SMTElementSig, SMTSetSig

items = [3, 1, 2]
sort(items)                                   # items == [1, 2, 3]

enc = ElementEncoding([3, 5, 7])
enc.type = ElementEncodingType.BINARYINDEX
enc.initialize_encoding_array()               # encoding array of size 4
enc.variables = ["v0", "v1"]
enc.num_vars = 2
model = {"v0": True, "v1": False}
element_value(enc, model.__getitem__)         # 5

domain = SMTSetSig(1, [1, 2, 5])
print(SMTElementSig(2, domain).declaration())
# (declare-const e2 Int)
# (assert (<= e2 5))
# (assert (>= e2 1))
# (assert (not (= e2 3)))
# (assert (not (= e2 4)))
```

## What this package does not do

It has no solver front end: it does not hold a constraint graph, write a
whole problem file, start an SMT or Alloy solver, or read a solver's model
back into signatures. The signature classes produce the declaration text
only, and `ValuedSignature.value` must be set by the caller. There is no
command-line tool.

## Tests

```
pip install -e .[test]
pytest
```