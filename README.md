# dsakit

dsakit collects classic data-structure and algorithm routines. It needs no
third-party packages.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.recursion`

These recursion patterns return their results and print nothing:

- `tail_sequence(n)`, `head_sequence(n)` and `count_up(n)` return, as lists,
  the values that tail recursion, head recursion and a plain loop visit.
- `tree_sequence(n)` returns the values that tree recursion visits, and
  `indirect_sequence(n)` returns those that two mutually recursive functions
  visit.
- `accumulated_sum(n)` sums using a counter that every call shares.
- `nested(n)` is the nested "91" function.
- `sum_formula(n)`, `sum_iterative(n)` and `sum_recursive(n)` each sum the
  first *n* natural numbers.
- `factorial(n)`, `factorial_iterative(n)`, `power(m, n)` and
  `power_fast(m, n)`. `power_fast` uses repeated squaring.
- `fib(n)`, `fib_iterative(n)` and `fib_memo(n)` compute Fibonacci numbers.
- `ncr(n, r)` and `ncr_pascal(n, r)` count combinations.
- `hanoi(n, source, spare, target)` returns the Tower of Hanoi moves as a
  list of `(from, to)` pairs.

The recursive variants raise `ValueError` when given a negative argument.
`ncr` and `ncr_pascal` also raise `ValueError` when `r > n`.

```python
from dsakit.recursion import hanoi, power_fast

power_fast(2, 9)     # 512
hanoi(2, 1, 2, 3)    # [(1, 2), (1, 3), (2, 3)]
```

### `dsakit.strings`

String routines that work on ASCII text:

- `length(s)` returns the length of `s`.
- `to_lower(s)`, `to_upper(s)` and `toggle_case(s)` change the case of
  letters.
- `count_vowels_consonants(s)` returns `(vowels, consonants)`.
- `count_words(s)` counts words. The count is one more than the number of
  runs of spaces.
- `is_alphanumeric(s)` reports whether every character is an ASCII letter or
  digit.
- `reverse(s)` returns `s` reversed, and `is_palindrome(s)` tests for a
  palindrome.
- `compare(a, b)` returns `-1`, `0` or `1`.
- `duplicates(s)` maps each letter that occurs more than once to its count.
- `is_anagram(s, t)` tests whether two strings are anagrams.
- `permutations(s)` is a generator that yields every arrangement of the
  characters of `s`.

`duplicates` and `is_anagram` accept only lowercase ASCII letters. Any other
input raises `ValueError`.

```python
from dsakit.strings import is_anagram, toggle_case

toggle_case("wELCome")             # "WelcOME"
is_anagram("decimal", "medical")   # True
```

### `dsakit.stack`

`Stack(capacity=None)` is a last-in, first-out stack.

- With a capacity, pushing past it raises `StackOverflowError`. Without one,
  the stack grows without bound.
- It has `push`, `pop`, `top`, `is_empty` and `is_full`.
- `peek(index)` reads the element at a 1-based position, where index 1 is
  the top. An out-of-range index raises `IndexError`.
- `len()` gives the number of elements, and iterating over the stack goes
  from the top down.
- `pop` and `top` on an empty stack raise `StackUnderflowError`.

### `dsakit.expressions`

- `is_balanced(expr)` checks that `()`, `[]` and `{}` are properly nested.
- `infix_to_postfix(infix)` converts an expression that uses `+ - * /` with
  no parentheses. It raises `ValueError` for `^`, `(` or `)`.
- `infix_to_postfix_full(infix)` also handles parentheses and `^`, which is
  right-associative. It raises `ValueError` for unmatched parentheses.
- `evaluate_postfix(postfix)` evaluates a postfix expression whose operands
  are single digits.
  - Division truncates toward zero.
  - Malformed input raises `ValueError`.
  - Division by zero raises `ZeroDivisionError`.

```python
from dsakit.expressions import evaluate_postfix, infix_to_postfix_full

infix_to_postfix_full("((a+b)*c)-d^e^f")  # "ab+c*def^^-"
evaluate_postfix("234*+82/-")             # 10
```

### `dsakit.linear_queue`

`Queue(capacity=10)` is a linear queue over a fixed number of slots.

- Each enqueue uses up one slot for good. After `capacity` enqueues the
  queue reports full, even if some elements have since been dequeued.
- It has `enqueue`, `dequeue`, `is_empty` and `is_full`.
- It supports `len()` and iterates from front to rear.
- Enqueueing when the queue is full raises `QueueFullError`.
- Dequeueing an empty queue raises `QueueEmptyError`.