"""Problems solved with two pointers moving through a sequence."""

from dsakit.arrays import sort_colors


def dutch_flag_sort(arr):
    """Sort a list of 0s, 1s and 2s in place and return it."""
    sort_colors(arr)
    return arr


def pair_with_target_sum(arr, target_sum):
    """Return ``[i, j]`` with ``i < j`` and ``arr[i] + arr[j] == target_sum`` in a sorted list.

    Returns ``[-1, -1]`` when there is no such pair.
    """
    left, right = 0, len(arr) - 1
    while left < right:
        current = arr[left] + arr[right]
        if current == target_sum:
            return [left, right]
        if current > target_sum:
            right -= 1
        else:
            left += 1
    return [-1, -1]


def max_area(height):
    """Return the most water a container formed by two of the lines can hold."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        elif height[left] > height[right]:
            right -= 1
        else:
            left += 1
            right -= 1
    return best


def make_squares(arr):
    """Return the squares of a sorted list in ascending order."""
    squares = []
    left, right = 0, len(arr) - 1
    while left <= right:
        left_square = arr[left] * arr[left]
        right_square = arr[right] * arr[right]
        if left_square > right_square:
            squares.append(left_square)
            left += 1
        else:
            squares.append(right_square)
            right -= 1
    squares.reverse()
    return squares


def _search_pair(arr, target_sum, left, triplets):
    right = len(arr) - 1
    while left < right:
        current = arr[left] + arr[right]
        if current == target_sum:
            triplets.append([-target_sum, arr[left], arr[right]])
            left += 1
            right -= 1
            while left < right and arr[left] == arr[left - 1]:
                left += 1
            while left < right and arr[right] == arr[right + 1]:
                right -= 1
        elif target_sum > current:
            left += 1
        else:
            right -= 1


def search_triplets(arr):
    """Return every distinct triplet of ``arr`` summing to zero.

    ``arr`` is sorted in place; each triplet is in ascending order.
    """
    arr.sort()
    triplets = []
    for index in range(len(arr) - 2):
        if index > 0 and arr[index] == arr[index - 1]:
            continue
        _search_pair(arr, -arr[index], index + 1, triplets)
    return triplets