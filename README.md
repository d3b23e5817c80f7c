# dskit

A small collection of classic data structures and algorithms, each written
out in full so that its behaviour can be read, exercised and tested.

## What is inside

| Module | Contents |
| --- | --- |
| `dskit.vector` | `Vector`, a growable integer array with explicit capacity (minimum 16, doubling on growth, halving when under a quarter full) |
| `dskit.binary_search` | `binary_search` and `binary_search_recursive` over sorted sequences |
| `dskit.forward_list` | `ForwardList`, a singly linked list that tracks head and tail |
| `dskit.linked_list` | `LinkedList`, a singly linked list reached through its head only |
| `dskit.ring_queue` | `RingQueue`, a bounded circular-buffer queue, with `QueueFullError` and `QueueEmptyError` |
| `dskit.linked_queue` | `LinkedQueue`, an unbounded queue on linked nodes |
| `dskit.hash_table` | `HashTable`, a string-to-string table with separate chaining, and `string_hash` |
| `dskit.bst` | `BinarySearchTree`, `BstNode` and `is_binary_search_tree` |
| `dskit.splay_tree` | `SplayTree`, a top-down splay tree |
| `dskit.priority_queue` | `MaxHeap` (with `HeapFullError`), `heap_sort`, `heapify`, `percolate_down` |
| `dskit.graphs` | `UndirectedGraph` and `DirectedGraph` with depth-first search |
| `dskit.bits` | `bit_string`, `set_bit`, `clear_bit`, `is_little_endian`, `BitSet`, `bitsort` |
| `dskit.words` | `reverse_words` |

The package has no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it

```python
from dskit.vector import Vector
from dskit.binary_search import binary_search
from dskit.priority_queue import heap_sort
from dskit.words import reverse_words

v = Vector(2)
for n in (3, 1, 4, 1, 5):
    v.push(n)
v.remove(1)          # removes every occurrence
len(v)               # 3
v.find(4)            # 1
v.find(9)            # -1

numbers = [12, 34, 56, 78, 90]
binary_search(56, numbers)   # 2
binary_search(45, numbers)   # -1

data = [5, -2, 9, 0]
heap_sort(data)
data                 # [-2, 0, 5, 9]

reverse_words("My kingdom for a horse.")   # "horse. a for kingdom My"
```

Operations that cannot succeed, such as popping an empty list or reading
past the end of a vector, raise an exception instead of returning a marker
value. `BinarySearchTree.min()` and `max()` return 0 for an empty tree, and
`successor()` returns -1 when there is no next value.

## Command-line demos

A few modules come with a short demonstration:

```
dskit-vector 5       # builds a vector of 5 numbers, inserts, deletes and prints it
dskit-graphs         # depth-first walks over sample graphs
dskit-bits           # bit setting and clearing, and the machine's byte order
dskit-bits --sort    # reads integers from standard input, prints them sorted without duplicates
```

`dskit-vector` asks for the count on standard input when it is not given.

## What it does not include

There is no merge sort or quicksort here; the only general in-place sort is
`heap_sort`, with `bitsort` for distinct non-negative integers below a limit.