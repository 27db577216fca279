"""Singly linked list nodes and the classic pointer problems on them."""

from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: "ListNode | None" = None

    def __repr__(self):
        return f"ListNode({self.val!r})"


def _nodes(head):
    while head is not None:
        yield head
        head = head.next


def from_values(values):
    """Build a list holding ``values`` in order and return its head, or None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head):
    """Return the values of an acyclic list as a Python list."""
    return [node.val for node in _nodes(head)]


def find_middle(head):
    """Return the middle node, the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def middle_value(head):
    """Return the value of the middle node, or -1 for an empty list."""
    middle = find_middle(head)
    return -1 if middle is None else middle.val


def delete_node(node):
    """Remove ``node`` from its list without the head by taking over its successor.

    The last node of a list has no successor and is left unchanged.
    """
    successor = node.next
    if successor is not None:
        node.val = successor.val
        node.next = successor.next


def remove_nth_from_end(head, n):
    """Remove the n-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError(f"the list has fewer than {n} nodes")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head


def find_cycle_start(head):
    """Return the node where a cycle begins, or None if the list has no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def has_cycle(head):
    """Return True if following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def intersection_point(head1, head2):
    """Return the first node shared by two lists, or None if they never meet."""
    ptr1, ptr2 = head1, head2
    while ptr1 is not ptr2:
        ptr1 = ptr1.next if ptr1 is not None else head2
        ptr2 = ptr2.next if ptr2 is not None else head1
    return ptr1


def kth_from_last(head, k):
    """Return the value of the k-th node from the end, or -1 if the list is shorter."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    fast = head
    for _ in range(k):
        if fast is None:
            return -1
        fast = fast.next
    slow = head
    while fast is not None:
        fast = fast.next
        slow = slow.next
    return slow.val


def merge_sorted_lists(head1, head2):
    """Splice two sorted lists into one sorted list and return its head."""
    dummy = tail = ListNode(-1)
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def _split(head):
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        if fast is not None:
            slow = slow.next
    middle = slow.next
    slow.next = None
    return middle


def merge_sort(head):
    """Sort a list with merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    second = _split(head)
    return merge_sorted_lists(merge_sort(head), merge_sort(second))


def reverse_list(head):
    """Reverse a list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def is_palindrome(head):
    """Return True if the list reads the same in both directions.

    The second half is reversed for the comparison and restored afterwards.
    """
    right_head = reverse_list(find_middle(head))
    result = all(
        left.val == right.val for left, right in zip(_nodes(head), _nodes(right_head))
    )
    reverse_list(right_head)
    return result


def reverse_sublist(head, p, q):
    """Reverse the nodes at 1-based positions ``p`` to ``q`` in place; return the head."""
    if p == q:
        return head
    if p < 1 or p > q:
        raise ValueError(f"invalid positions p={p}, q={q}")
    previous = None
    current = head
    for _ in range(p - 1):
        if current is None:
            break
        previous, current = current, current.next
    if current is None:
        raise ValueError(f"the list has fewer than {p} nodes")

    last_of_first_part = previous
    last_of_sublist = current
    for _ in range(q - p + 1):
        if current is None:
            break
        current.next, previous, current = previous, current, current.next

    if last_of_first_part is not None:
        last_of_first_part.next = previous
    else:
        head = previous
    last_of_sublist.next = current
    return head