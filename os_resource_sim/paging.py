import logging
from typing import Iterator, List, Sequence, Tuple

logger = logging.getLogger(__name__)

FIFO = 'FIFO'
LRU = 'LRU'


def replay_references(references: Sequence[int], num_frames: int, policy: str) -> Iterator[Tuple[int, bool, List[int]]]:
	"""Yield (page, fault, frames) for each reference.

	Frames are ordered oldest first; under LRU a hit moves the page to the
	tail, so frames[0] is always the next victim for both policies.
	"""
	if num_frames < 1:
		raise ValueError(f'num_frames must be at least 1, got {num_frames}')
	if policy not in (FIFO, LRU):
		raise ValueError(f'unknown paging policy {policy!r}')

	frames: List[int] = []
	for page in references:
		fault = page not in frames
		if fault:
			if len(frames) >= num_frames:
				victim = frames.pop(0)
				logger.debug('%s fault on %d, evict %d', policy, page, victim)
			else:
				logger.debug('%s fault on %d', policy, page)
			frames.append(page)
		elif policy == LRU:
			frames.remove(page)
			frames.append(page)
		yield page, fault, list(frames)


def simulate_paging_fifo(references: Sequence[int], num_frames: int) -> int:
	return sum(1 for _, fault, _ in replay_references(references, num_frames, FIFO) if fault)


def simulate_paging_lru(references: Sequence[int], num_frames: int) -> int:
	return sum(1 for _, fault, _ in replay_references(references, num_frames, LRU) if fault)
