"""Problems solved with a stack."""

from itertools import groupby

_OPENING = {")": "(", "}": "{", "]": "["}


def decimal_to_binary(num):
    """Return the binary digits of a non-negative integer; 0 gives an empty string."""
    if num < 0:
        raise ValueError(f"{num} is negative")
    return format(num, "b") if num else ""


def next_greater_elements(arr):
    """Return, for each item, the nearest later item that is greater, or -1."""
    result = [-1] * len(arr)
    stack = []
    for index in reversed(range(len(arr))):
        value = arr[index]
        while stack and stack[-1] <= value:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(value)
    return result


def remove_consecutive_duplicates(s):
    """Collapse every run of equal adjacent characters of ``s`` to one character."""
    return "".join(ch for ch, _ in groupby(s))


def sort_stack(stack):
    """Sort a stack (a list whose top is its last item) so the largest item is on top.

    The input stack is emptied; the sorted stack is returned.
    """
    ordered = []
    while stack:
        item = stack.pop()
        while ordered and ordered[-1] > item:
            stack.append(ordered.pop())
        ordered.append(item)
    return ordered


def is_valid_parentheses(s):
    """Return True if the brackets of ``s`` open and close in matching pairs.

    Any character that is not an opening bracket closes the most recent one.
    """
    stack = []
    for ch in s:
        if ch in "({[":
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _OPENING.get(ch)
        if expected is not None and top != expected:
            return False
    return not stack