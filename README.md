# veriyapilari

Data-structure exercises, available as three console commands and as a set
of small building blocks: a stack, a queue, a binary search tree and a
queue-based radix sort.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

Each command takes an optional path to its input file. Without one it reads
the default file name from the current directory. If the file cannot be
read, the command prints an error and exits with status 1.

### `veriyapilari-listeler [path]`

The default path is `benioku.txt`. Every line holds whitespace-separated
integers. Each number is split into its value divided by ten (the line's
"upper" list) and its last digit (the line's "lower" list).

The command asks for two positions, `konumA` and `konumB`. It swaps the
upper list at line A with the lower list at line B. If either position is
outside the file, it prints `Girdiniz konum sinir disidir!!` and leaves the
lists as they were.

It then walks the lists column by column, as long as any upper list still
has values. For each column it averages the values present and adds the
average to a running total. The total is truncated to one decimal after each
step. It prints the two totals as ` Ust: ...` and ` Alt:...`.

### `veriyapilari-yigin-agac [path]`

The default path is `veriler.txt`. The numbers of each line are pushed onto
stacks in order. A new stack starts before every even number that is larger
than the number before it. Each stack is popped into its own binary search
tree, and duplicates are ignored.

The command picks the tallest tree. Ties go to the tree with the larger sum
of values, and then to the earlier tree. It prints that tree in postorder,
each value shown as a character followed by two spaces. There is a short
pause after each line.

### `veriyapilari-organizma [path]`

The default path is `Veri.txt`. The command runs the organism simulation:

- Each line is a **cell**. Its values are sorted with the radix sort, and
  the middle value (the lower middle for an even count) joins the
  **tissue**.
- Every 20 lines, the tissue values are inserted into a binary search tree,
  and the tissue is emptied. The tree forms an **organ**. The organ is
  balanced when the heights of the root's two subtrees differ by at most one.
- The organ's mutation flag is healthy when the organ is balanced and the
  root value is not a multiple of 50.
- Every 2000 lines a new **system** starts. A system holds at most 100
  organs.

The screen is cleared with the system's `clear` (or `cls`) command, falling
back to terminal escape codes. The organism is then drawn: one row of 100
characters per completed system, with a blank for a balanced organ and `#`
otherwise. After Enter is pressed, the screen is cleared again and the
mutation flags are drawn the same way. The system still being filled, after
the last full 2000 lines, is not drawn.

Negative numbers or empty lines cannot be sorted into a cell. The command
reports them as an error and exits with status 1.

## Library use

```python
from veriyapilari.radix import radix_sort, digit_count
from veriyapilari.agac import BinarySearchTree, node_height
from veriyapilari.yigin import Stack
from veriyapilari.kuyruk import Queue
from veriyapilari.organ import is_balanced
from veriyapilari.kontrol import halve_even, mutate_tree

print(radix_sort([170, 45, 75, 90, 802, 24, 2, 66]))

tree = BinarySearchTree([50, 30, 70, 20, 40])
print(tree.height(), list(tree.postorder()), tree.total, is_balanced(tree.root))

mutated = mutate_tree(tree)   # rebuilt from postorder with even values halved
print(list(mutated.postorder()))

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.pop(), len(stack))

queue = Queue()
queue.push(7)
print(queue.peek(), queue.is_empty(), str(queue))
```

Other modules include:

- `veriyapilari.listeler`: `split_digits`, `swap_positions`,
  `column_average_sums` and `read_lines`.
- `veriyapilari.yigin_agac`: `count_stacks`, `split_into_stacks`,
  `build_trees`, `tallest_tree` and `process_line`.
- `veriyapilari.doku`: `Cell` and `Tissue`.
- `veriyapilari.organizma`: `OrganSystem` and `Organism`, with `render` and
  `render_mutation`.
- `veriyapilari.simulasyon`: `simulate(lines)`, which returns an `Organism`.

Several operations raise errors:

- Popping an empty `Stack` or `Queue`, or peeking into an empty `Queue`,
  raises `IndexError`.
- `radix_sort` raises `ValueError` for negative numbers.
- `Tissue.add_cell` raises `ValueError` for an empty cell.
- `is_balanced(None)` raises `ValueError`.
- Adding more than 100 organs to an `OrganSystem` raises `IndexError`.

## Limits

- The organism simulation does not use `mutate_tree` when it sets the
  mutation flags. They depend only on the organ's own tree.
- Results are printed to the terminal only; nothing is saved.