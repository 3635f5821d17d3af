"""Array problems: sums, jumps, scheduling, spans and inversions."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Sequence
from itertools import accumulate

_DAY_SLOTS = 2361


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet that sums to zero, each in ascending order."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    for i in range(n - 2):
        first = ordered[i]
        if first > 0:
            break
        if i > 0 and first == ordered[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, ordered[j], ordered[k]])
                k -= 1
                while j < k and ordered[k] == ordered[k + 1]:
                    k -= 1
                j += 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
    return result


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first index to the last.

    Each value gives the maximum jump length from its position.
    """
    last = len(nums) - 1
    reach = boundary = jumps = 0
    for i, step in enumerate(nums[:last]):
        reach = max(reach, i + step)
        if reach >= last:
            return jumps + 1
        if i == boundary:
            boundary = reach
            jumps += 1
    return jumps


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the platforms a station needs for trains given as HHMM times.

    Raises ValueError when the sequences differ in length or a time is out
    of range.
    """
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    delta = [0] * _DAY_SLOTS
    for arrival, departure in zip(arrivals, departures):
        if not 0 <= arrival < _DAY_SLOTS or not 0 <= departure < _DAY_SLOTS - 1:
            raise ValueError(f"time out of range: {arrival}, {departure}")
        delta[arrival] += 1
        delta[departure + 1] -= 1
    occupancy = list(accumulate(delta))
    return max([1, *occupancy[1:]])


def stock_span(prices: Sequence[int]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had price <= it."""
    spans: list[int] = []
    for i, price in enumerate(prices):
        span = 1
        while i - span >= 0 and price >= prices[i - span]:
            span += spans[i - span]
        spans.append(span)
    return spans


def avoid_flood(rains: Sequence[int]) -> list[int]:
    """Plan which lake to dry on each dry day so that no lake floods.

    Rain days are marked -1 in the plan; an empty list means a flood cannot
    be avoided.
    """
    upcoming: dict[int, list[int]] = defaultdict(list)
    for day in reversed(range(len(rains))):
        if rains[day]:
            upcoming[rains[day]].append(day)
    plan: list[int] = []
    due: list[int] = []
    for day, lake in enumerate(rains):
        if lake:
            days = upcoming[lake]
            if len(days) >= 2:
                days.pop()
                heapq.heappush(due, days[-1])
            plan.append(-1)
        elif due:
            next_rain = heapq.heappop(due)
            if next_rain < day:
                return []
            plan.append(rains[next_rain])
        else:
            plan.append(1)
    return [] if due else plan


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the furthest building index reachable with the given bricks and ladders."""
    last = len(heights) - 1
    climbs: list[int] = []
    i = 0
    while len(climbs) < ladders and i < last:
        diff = heights[i + 1] - heights[i]
        if diff > 0:
            heapq.heappush(climbs, diff)
        i += 1
    while i < last:
        diff = heights[i + 1] - heights[i]
        if diff > 0:
            if climbs and climbs[0] < diff:
                bricks -= heapq.heapreplace(climbs, diff)
            else:
                bricks -= diff
        if bricks < 0:
            return i
        i += 1
    return max(i, 0)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``nums[i] + nums[j] == target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if target - value in seen:
            return [seen[target - value], index]
        seen[value] = index
    return []


def _sort_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_count(items[:mid])
    right, right_count = _sort_count(items[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Sequence[int]) -> int:
    """Return the number of pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_count(list(values))[1]