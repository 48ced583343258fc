from __future__ import annotations

from typing import Sequence


def extract_ranges(nums: Sequence[int]) -> str:
    """Return the range expression of an ordered list of integers.

    Runs of three or more consecutive integers become ``start-end``; shorter
    runs are listed individually.

        [0, 1, 2, 5, 7, 8, 9] -> '0-2,5,7-9'
        [1, 2, 4, 5]          -> '1,2,4,5'
    """
    parts: list[str] = []
    i = 0
    while i < len(nums):
        j = i
        while j + 1 < len(nums) and nums[j + 1] == nums[j] + 1:
            j += 1
        if j - i >= 2:
            parts.append(f"{nums[i]}-{nums[j]}")
        else:
            parts.extend(str(x) for x in nums[i : j + 1])
        i = j + 1
    return ",".join(parts)
