# storomata

Building blocks for weighted automata with storage: search agendas, tree
stacks and pushdowns with the instructions that act on them, the storage
symbols used for grammar-derived automata, and equivalence relations for
relabelling those symbols.

## What is inside

- **Agendas** (`storomata.agenda`): `Stack`, `Queue`, `PriorityHeap`,
  `BeamHeap` and `LimitedHeap`, all sharing the `Agenda` interface (`push`,
  `pop`, `peek`, `len`, `is_empty`, `extend`). Weighted containers pop the
  element of greatest priority first; a priority is given on `push` or taken
  from a `weight` function. `BeamHeap` rejects elements below `beta` times the
  best priority; `LimitedHeap` keeps at most `capacity` elements and returns the
  one it dropped.
- **Search** (`storomata.search`): `Search` explores a graph lazily from an
  agenda and a successor function. It can run depth-first (`Search.dfs`),
  breadth-first (`Search.bfs`) or by weight (`Search.weighted`).
  `Search.uniques()` returns a `UniqueSearch` that skips nodes already seen.
- **Tree stacks** (`storomata.tree_stack`): the persistent `TreeStack`, an
  upside-down tree with a stack pointer, with `push`, `push_with`,
  `push_next`, `up`, `ups`, `down`, `set`, `map`, `all` and `to_tree`.
  Failed moves raise `TreeStackError`.
- **Tree-stack instructions** (`storomata.tree_stack_instruction`): `Up`,
  `Push` and `Down`. `apply` returns the list of resulting tree stacks (empty
  when the instruction does not apply). `parse_tree_stack_instruction` reads
  `Up n cur old new`, `Push n cur new` and `Down cur old new`.
- **Pushdowns** (`storomata.pushdown`, `storomata.pushdown_instruction`): an
  immutable `PushDown` whose first element is the bottom symbol, with
  `replace` (raising `PushDownError` on a mismatch), and the `Replace` and
  height-limited `ReplaceK` instructions.
- **Storage symbols**: `storomata.pos_state` holds `Designated`, `Initial`
  and `Position` (a rule, a component and a position), along with
  `map_pos_state` and `to_abstract_syntax_tree`. `storomata.push_state` holds
  the nonterminal `Nt` and terminal `T` symbols and `map_push_state`.
- **Equivalence relations** (`storomata.equivalence_classes`): parse lines
  such as `0 [0, 1]` and `2 *` into an `EquivalenceRelation`, then map values
  to their class labels with `project`. `parse_class` and `parse_set` parse
  single pieces and return the unparsed rest. Malformed text raises
  `ParseError`, and text that ends too early raises `IncompleteInput`.

## Examples

```python
from storomata.search import Search

def successors(n):
    return [n + 1] if n < 3 else []

print(list(Search.bfs([0], successors)))   # [0, 1, 2, 3]
```

```python
from storomata.tree_stack import TreeStack

ts = TreeStack("@").push(1, "a").down()
print(ts.up(1).current_symbol())   # a
```

```python
from storomata.pushdown import PushDown
from storomata.pushdown_instruction import Replace

print(Replace((4, 3), (5, 6)).apply(PushDown([1, 2, 3, 4])))   # [PushDown([1, 2, 5, 6])]
```

```python
from storomata.equivalence_classes import EquivalenceRelation

rel = EquivalenceRelation.parse("0 [0, 1]\n1 [2, 4]\n2 *", int, int)
print(rel.project(4), rel.project(3))   # 1 2
```

## What it does not do

The package provides storage types, their instructions and the pieces
around them. It has no automaton that recognises words, and it does not read
grammars or build automata from them. It has no strategies that approximate
one automaton by another, and it has no command-line program. Each
instruction's `apply` only computes the storage that a single step produces.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```