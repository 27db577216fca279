"""Binary search over rotated arrays and integer square roots."""


def find_min_rotated(nums):
    """Return the smallest value of a rotated sorted list of distinct values."""
    if not nums:
        raise ValueError("find_min_rotated() requires a non-empty sequence")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[right]:
            left = mid + 1
        else:
            right = mid
    return nums[left]


def is_perfect_square(num):
    """Return True if ``num`` is the square of an integer greater than zero."""
    if num < 2:
        return num == 1
    left, right = 2, num // 2
    while left <= right:
        mid = (left + right) // 2
        guess = mid * mid
        if guess == num:
            return True
        if guess < num:
            left = mid + 1
        else:
            right = mid - 1
    return False


def search_rotated(arr, key):
    """Return the index of ``key`` in a rotated sorted list of distinct values, or -1."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = (start + end) // 2
        if arr[mid] == key:
            return mid
        if arr[start] <= arr[mid]:
            if arr[start] <= key < arr[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif arr[mid] < key <= arr[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_rotated_with_duplicates(arr, key):
    """Return an index of ``key`` in a rotated sorted list that may repeat values, or -1."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = (start + end) // 2
        if arr[mid] == key:
            return mid
        if arr[start] == arr[mid] == arr[end]:
            start += 1
            end -= 1
        elif arr[start] <= arr[mid]:
            if arr[start] <= key < arr[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif arr[mid] < key <= arr[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def int_sqrt(x):
    """Return the integer square root of ``x``; values below 2 are returned as they are."""
    if x < 2:
        return x
    left, right = 2, x // 2
    while left <= right:
        mid = (left + right) // 2
        square = mid * mid
        if square > x:
            right = mid - 1
        elif square < x:
            left = mid + 1
        else:
            return mid
    return right