"""A bounded stack and algorithms built on it."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

DEFAULT_CAPACITY = 100

_OPERATORS = frozenset("+-*/")


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when reading from an empty stack."""


class Stack:
    """A last-in, first-out container holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list = []

    def push(self, value) -> None:
        """Place ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflow(f"stack is full at {self.capacity} items")
        self._items.append(value)

    def pop(self):
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflow("pop from an empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflow("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the stack has reached its capacity."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)


def delete_middle(items: Sequence) -> list:
    """Return the stack contents without its middle element.

    ``items`` is given bottom to top, and so is the result. Counting from the
    top, the element at index ``ceil(n / 2)`` is the one removed.
    """
    stack = Stack(max(len(items), 1))
    for item in items:
        stack.push(item)
    from_top = []
    while not stack.is_empty():
        from_top.append(stack.pop())
    target = (len(from_top) + 1) // 2
    for index, item in enumerate(from_top):
        if index != target:
            stack.push(item)
    return list(stack)


def next_greater_elements(values: Sequence[int]) -> list[int | None]:
    """For each value, find the first strictly greater value to its right.

    The result is aligned with ``values``; ``None`` marks values with no
    greater element after them.
    """
    result: list[int | None] = [None] * len(values)
    pending = Stack(max(len(values), 1))
    for index, value in enumerate(values):
        while not pending.is_empty() and values[pending.peek()] < value:
            result[pending.pop()] = value
        pending.push(index)
    return result


def _tokens(expression: str) -> list[str]:
    if any(char.isspace() for char in expression):
        return expression.split()
    return list(expression)


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero in postfix expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of integers and ``+ - * /``.

    Without whitespace every character is a token, so operands are single
    digits; with whitespace, tokens are separated by it and operands may have
    several digits. Division truncates toward zero.
    """
    tokens = _tokens(expression)
    if not tokens:
        raise ValueError("empty postfix expression")
    stack = Stack(len(tokens))
    for token in tokens:
        if token.isdigit():
            stack.push(int(token))
        elif token in _OPERATORS:
            try:
                right = stack.pop()
                left = stack.pop()
            except StackUnderflow:
                raise ValueError(
                    f"operator {token!r} lacks two operands"
                ) from None
            stack.push(_apply(token, left, right))
        else:
            raise ValueError(f"unexpected token {token!r}")
    if len(stack) != 1:
        raise ValueError(f"expression leaves {len(stack)} values on the stack")
    return stack.pop()