"""
Timing allocation for script segments and editing blocks
"""
from typing import List, NamedTuple, Sequence, Tuple


class Slot(NamedTuple):
    """Half-open [start, end) second range"""
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


# (phase id, weight in percent). Changing these changes every blueprint.
SEGMENT_PHASES: Tuple[Tuple[str, int], ...] = (
    ("hook", 15),
    ("setup", 45),
    ("payoff", 28),
    ("cta", 12),
)

EDITING_BLOCKS: Tuple[Tuple[str, int], ...] = (
    ("cold_open", 10),
    ("context", 18),
    ("proof", 22),
    ("demo", 25),
    ("recap", 15),
    ("end_card", 10),
)


def allocate(total: int, weights: Sequence[int]) -> List[Slot]:
    """
    Split [0, total] into contiguous integer slots proportional to weights.

    Every slot but the last gets floor(total * weight / sum(weights)) seconds
    (at least 1); the last slot takes whatever is left so the tiling always
    ends exactly at total.
    """
    count = len(weights)
    if count == 0:
        return []
    total = max(total, count)
    weight_sum = sum(weights) or count

    seconds = [max(1, total * weight // weight_sum) for weight in weights[:-1]]
    remainder = total - sum(seconds)
    while remainder < 1:
        # Only reachable when total is close to the slot count
        largest = seconds.index(max(seconds))
        seconds[largest] -= 1
        remainder += 1
    seconds.append(remainder)

    slots = []
    cursor = 0
    for length in seconds:
        slots.append(Slot(cursor, cursor + length))
        cursor += length
    return slots


def allocate_segments(duration: int) -> List[Tuple[str, Slot]]:
    """Script phases (hook, setup, payoff, cta) covering the whole runtime"""
    slots = allocate(duration, [weight for _, weight in SEGMENT_PHASES])
    return [(phase, slot) for (phase, _), slot in zip(SEGMENT_PHASES, slots)]


def allocate_editing_blocks(duration: int) -> List[Tuple[str, Slot]]:
    """Editor marker blocks, an independent tiling of the same runtime"""
    slots = allocate(duration, [weight for _, weight in EDITING_BLOCKS])
    return [(block, slot) for (block, _), slot in zip(EDITING_BLOCKS, slots)]


def format_timestamp(slot: Slot) -> str:
    """Zero-padded 'MM:SS-MM:SS' so string order matches time order"""
    return f"{_clock(slot.start)}-{_clock(slot.end)}"


def _clock(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
