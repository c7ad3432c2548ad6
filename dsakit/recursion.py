"""Classic recursive algorithms: traversal orders, sums, powers, Fibonacci, nCr, Hanoi."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "tail_sequence",
    "head_sequence",
    "count_up",
    "accumulated_sum",
    "tree_sequence",
    "indirect_sequence",
    "nested",
    "sum_formula",
    "sum_iterative",
    "sum_recursive",
    "factorial",
    "factorial_iterative",
    "power",
    "power_fast",
    "fib",
    "fib_iterative",
    "fib_memo",
    "ncr",
    "ncr_pascal",
    "hanoi",
]


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def tail_sequence(n: int) -> list[int]:
    """Values visited by tail recursion: emitted before the recursive call (n down to 1)."""

    def walk(k: int) -> Iterator[int]:
        if k > 0:
            yield k
            yield from walk(k - 1)

    return list(walk(n))


def head_sequence(n: int) -> list[int]:
    """Values visited by head recursion: emitted after the recursive call (1 up to n)."""

    def walk(k: int) -> Iterator[int]:
        if k > 0:
            yield from walk(k - 1)
            yield k

    return list(walk(n))


def count_up(n: int) -> list[int]:
    """Iterative equivalent of head recursion: 1 up to n."""
    return list(range(1, n + 1))


def accumulated_sum(n: int) -> int:
    """Sum where every level adds a counter shared across all recursive calls.

    The counter is incremented on the way down, so every level adds its final value.
    """
    calls = 0

    def step(k: int) -> int:
        nonlocal calls
        if k > 0:
            calls += 1
            return step(k - 1) + calls
        return 0

    return step(n)


def tree_sequence(n: int) -> list[int]:
    """Values emitted by tree recursion: emit n, then recurse twice on n - 1."""

    def walk(k: int) -> Iterator[int]:
        if k > 0:
            yield k
            yield from walk(k - 1)
            yield from walk(k - 1)

    return list(walk(n))


def indirect_sequence(n: int) -> list[int]:
    """Values emitted by two mutually recursive functions.

    The first emits n and calls the second on n - 1; the second emits n (if n > 1)
    and calls the first on n // 2.
    """

    def first(k: int) -> Iterator[int]:
        if k > 0:
            yield k
            yield from second(k - 1)

    def second(k: int) -> Iterator[int]:
        if k > 1:
            yield k
            yield from first(k // 2)

    return list(first(n))


def nested(n: int) -> int:
    """Nested recursion where the recursive call is passed as its own argument."""
    if n > 100:
        return n - 10
    return nested(nested(n + 11))


def sum_formula(n: int) -> int:
    """Sum of the first n natural numbers by the closed formula."""
    return n * (n + 1) // 2


def sum_iterative(n: int) -> int:
    """Sum of the first n natural numbers by a loop; zero when n < 1."""
    return sum(range(1, n + 1))


def sum_recursive(n: int) -> int:
    """Sum of the first n natural numbers by recursion."""
    _require_non_negative("n", n)
    if n == 0:
        return 0
    return sum_recursive(n - 1) + n


def factorial(n: int) -> int:
    """n! by recursion."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    return factorial(n - 1) * n


def factorial_iterative(n: int) -> int:
    """n! by a loop; one when n < 1."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def power(m: int, n: int) -> int:
    """m raised to n by linear recursion."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    return power(m, n - 1) * m


def power_fast(m: int, n: int) -> int:
    """m raised to n by repeated squaring."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    if n % 2 == 0:
        return power_fast(m * m, n // 2)
    return m * power_fast(m * m, (n - 1) // 2)


def fib(n: int) -> int:
    """n-th Fibonacci number by plain (exponential) recursion; n itself when n <= 1."""
    if n <= 1:
        return n
    return fib(n - 2) + fib(n - 1)


def fib_iterative(n: int) -> int:
    """n-th Fibonacci number in linear time with two running terms."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fib_memo(n: int) -> int:
    """n-th Fibonacci number by memoised recursion."""
    memo: dict[int, int] = {}

    def go(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = go(k - 2) + go(k - 1)
        return memo[k]

    return go(n)


def _check_ncr(n: int, r: int) -> None:
    _require_non_negative("r", r)
    if r > n:
        raise ValueError(f"r must not exceed n, got n={n}, r={r}")


def ncr(n: int, r: int) -> int:
    """Number of combinations via the factorial formula."""
    _check_ncr(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def ncr_pascal(n: int, r: int) -> int:
    """Number of combinations via Pascal's triangle recursion."""
    _check_ncr(n, r)

    def go(k: int, j: int) -> int:
        if j == 0 or j == k:
            return 1
        return go(k - 1, j - 1) + go(k - 1, j)

    return go(n, r)


def hanoi(n: int, source: int, spare: int, target: int) -> list[tuple[int, int]]:
    """Moves (from, to) that carry n disks from source to target using spare."""

    def solve(k: int, a: int, b: int, c: int) -> Iterator[tuple[int, int]]:
        if k > 0:
            yield from solve(k - 1, a, c, b)
            yield (a, c)
            yield from solve(k - 1, b, a, c)

    return list(solve(n, source, spare, target))