# dsakit

Small, readable implementations of classic data structures and algorithms
in plain Python:

- `dsakit.nodes`: `Node` and `DoublyNode`, plus `format_chain`, which renders a
  chain of nodes as `a -> b -> nullptr`
- `dsakit.linked_list`: `LinkedList`, a singly linked list
- `dsakit.doubly_linked_list`: `DoublyLinkedList`, which can also be walked
  backwards with `reversed()`
- `dsakit.dynamic_array`: `DynamicArray`, an indexed sequence with insertion and
  removal at any position
- `dsakit.stack`: `Stack`, last in, first out
- `dsakit.queue`: `Queue`, first in, first out
- `dsakit.deque`: `Deque`, a double-ended queue
- `dsakit.brackets`: `is_valid`, which checks that `{}`, `[]` and `()` are
  balanced and properly nested
- `dsakit.sorting`: `bubble_sort`, `selection_sort` and `insertion_sort`, which
  sort a mutable sequence in place

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests, install it with the
test extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
from dsakit.linked_list import LinkedList

items = LinkedList([76, 43, 15, 44])
items.insert_at(4, 100)
items.insert_at(3, 48)
items.insert_head(22)
print(items)            # 22 -> 76 -> 43 -> 15 -> 48 -> 44 -> 100
print(items.get(2))     # 43
print(items.find(15))   # 3
items.remove_at(0)
print(list(items))      # [76, 43, 15, 48, 44, 100]
```

```python
from dsakit.doubly_linked_list import DoublyLinkedList
from dsakit.dynamic_array import DynamicArray

both_ways = DoublyLinkedList([1, 2, 3])
print(both_ways)                 # h:1 <-> 2 <-> 3:t
print(list(reversed(both_ways))) # [3, 2, 1]

array = DynamicArray([21, 47, 87])
array.insert(2, 25)
print(array)            # [21, 47, 25, 87]
```

```python
from dsakit.stack import Stack
from dsakit.queue import Queue
from dsakit.deque import Deque

stack = Stack()
for value in (32, 47, 18):
    stack.push(value)
print(stack.top())      # 18
print(list(stack))      # [18, 47, 32]

queue = Queue()
queue.enqueue(35)
queue.enqueue(91)
print(queue.front(), queue.back())   # 35 91

deque = Deque()
deque.enqueue_front(26)
deque.enqueue_back(78)
deque.enqueue_front(91)
print(list(deque))      # [91, 26, 78]
```

```python
from dsakit.brackets import is_valid
from dsakit.sorting import insertion_sort

is_valid("{() [{}]}")   # True
is_valid("{()[]}[")     # False

values = [43, 21, 26, 38, 17, 30]
insertion_sort(values)
print(values)           # [17, 21, 26, 30, 38, 43]
```

## Behaviour worth knowing

- `get` and `insert_at` / `insert` raise `IndexError` for an index out of
  range; `find` raises `ValueError` when the value is absent.
- `remove_at` and `DynamicArray.remove` ignore an out-of-range index, and the
  `remove_*`, `pop`, `dequeue*` methods do nothing on an empty container.
- `Stack.top`, `Queue.front`/`back` and `Deque.front`/`back` raise `IndexError`
  when the container is empty.
- Every container supports `len()`, iteration and `str()`; the sorting
  functions return `None` and change the sequence they are given.

The package is a library only: it installs no command-line program.