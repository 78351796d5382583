import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from os_resource_sim.models import ProcessDesc

logger = logging.getLogger(__name__)

HOLE_SIZE_RANGE = (100, 200)
HOLE_GAP = 10


@dataclass
class MemoryHole:
	start: int
	size: int

	@property
	def end(self) -> int:
		return self.start + self.size


@dataclass
class Allocation:
	pid: int
	request: int
	block: Optional[MemoryHole] = None

	@property
	def succeeded(self) -> bool:
		return self.block is not None


@dataclass
class AllocationReport:
	allocations: List[Allocation]
	holes: List[MemoryHole]


def first_fit_allocate(holes: List[MemoryHole], request: int) -> Optional[MemoryHole]:
	"""Carve `request` units out of the first hole large enough to hold them.

	The chosen hole shrinks in place and is dropped once empty. Returns the
	allocated block, or None (with `holes` untouched) when nothing fits.
	"""
	if request <= 0:
		raise ValueError(f'allocation request must be positive, got {request}')
	for i, hole in enumerate(holes):
		if hole.size >= request:
			allocated = MemoryHole(hole.start, request)
			hole.start += request
			hole.size -= request
			if hole.size == 0:
				del holes[i]
			return allocated
	return None


def generate_holes(count: int,
				   rng: Optional[random.Random] = None,
				   hole_sizes: Optional[Sequence[int]] = None,
				   size_range: Tuple[int, int] = HOLE_SIZE_RANGE,
				   gap: int = HOLE_GAP) -> List[MemoryHole]:
	"""Lay out `count` holes from address 0, each followed by a fixed gap.

	Sizes come from `hole_sizes` when given, otherwise uniformly from
	`size_range` (inclusive) using `rng`.
	"""
	if hole_sizes is not None:
		if len(hole_sizes) < count:
			raise ValueError(f'need {count} hole sizes, got {len(hole_sizes)}')
		sizes = list(hole_sizes[:count])
	else:
		rng = rng or random.Random()
		low, high = size_range
		sizes = [rng.randint(low, high) for _ in range(count)]

	holes: List[MemoryHole] = []
	start = 0
	for size in sizes:
		holes.append(MemoryHole(start, size))
		start += size + gap
	return holes


def simulate_memory_allocation(processes: List[ProcessDesc],
							   rng: Optional[random.Random] = None,
							   hole_sizes: Optional[Sequence[int]] = None,
							   size_range: Tuple[int, int] = HOLE_SIZE_RANGE,
							   gap: int = HOLE_GAP) -> AllocationReport:
	holes = generate_holes(len(processes), rng=rng, hole_sizes=hole_sizes, size_range=size_range, gap=gap)
	allocations: List[Allocation] = []
	for p in processes:
		block = first_fit_allocate(holes, p.memory_requirement)
		if block is None:
			logger.debug('P%d: no hole fits %d units', p.pid, p.memory_requirement)
		allocations.append(Allocation(pid=p.pid, request=p.memory_requirement, block=block))
	return AllocationReport(allocations=allocations, holes=holes)
