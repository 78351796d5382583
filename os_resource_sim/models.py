from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional


DEFAULT_MEMORY_REQUIREMENT = 100
IDLE_LABEL = 'Idle'


@dataclass(frozen=True)
class ProcessDesc:
	pid: int
	arrival: int
	burst: int
	priority: int
	memory_requirement: int = DEFAULT_MEMORY_REQUIREMENT

	@property
	def label(self) -> str:
		return f'P{self.pid}'


@dataclass(eq=False)
class ProcessRun:
	"""Scheduling state owned by a single policy run.

	The descriptor is shared between runs and never mutated; everything a
	policy writes lives here, so each run starts from a clean slate.
	"""
	desc: ProcessDesc
	remaining: int = 0
	cpu_init: Optional[int] = None
	completion: Optional[int] = None
	turnaround: int = 0
	waiting: int = 0

	def __post_init__(self):
		self.remaining = self.desc.burst

	@property
	def pid(self) -> int:
		return self.desc.pid

	@property
	def arrival(self) -> int:
		return self.desc.arrival

	@property
	def burst(self) -> int:
		return self.desc.burst

	@property
	def priority(self) -> int:
		return self.desc.priority

	def mark_dispatched(self, time: int):
		if self.cpu_init is None:
			self.cpu_init = time

	def mark_complete(self, time: int):
		self.completion = time
		self.turnaround = time - self.desc.arrival
		self.waiting = self.turnaround - self.desc.burst


def fresh_runs(processes: List[ProcessDesc]) -> List[ProcessRun]:
	return [ProcessRun(desc=p) for p in processes]


def sort_by_arrival(processes: List[ProcessDesc]) -> List[ProcessDesc]:
	# sorted() is stable, so equal arrivals keep input order
	return sorted(processes, key=lambda p: p.arrival)


class GanttSegment(NamedTuple):
	label: str
	start: int
	finish: int

	@property
	def duration(self) -> int:
		return self.finish - self.start

	@property
	def is_idle(self) -> bool:
		return self.label == IDLE_LABEL


@dataclass
class ProcessMetrics:
	pid: int
	arrival: int
	burst: int
	priority: int
	cpu_init: int
	completion: int
	waiting: int
	turnaround: int


def build_metrics(runs: List[ProcessRun]) -> List[ProcessMetrics]:
	metrics: List[ProcessMetrics] = []
	for r in runs:
		metrics.append(ProcessMetrics(
			pid=r.pid,
			arrival=r.arrival,
			burst=r.burst,
			priority=r.priority,
			cpu_init=r.cpu_init if r.cpu_init is not None else -1,
			completion=r.completion if r.completion is not None else -1,
			waiting=r.waiting,
			turnaround=r.turnaround
		))
	return metrics


@dataclass
class ScheduleResult:
	title: str
	processes: List[ProcessMetrics] = field(default_factory=list)
	gantt: List[GanttSegment] = field(default_factory=list)
	show_priority: bool = False

	@property
	def average_waiting(self) -> float:
		if not self.processes:
			return 0.0
		return sum(m.waiting for m in self.processes) / len(self.processes)

	@property
	def average_turnaround(self) -> float:
		if not self.processes:
			return 0.0
		return sum(m.turnaround for m in self.processes) / len(self.processes)

	@property
	def total_time(self) -> int:
		return self.gantt[-1].finish if self.gantt else 0
