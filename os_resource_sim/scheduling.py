import logging
from collections import deque
from typing import Callable, Deque, List, Tuple

from os_resource_sim.models import (
	IDLE_LABEL,
	GanttSegment,
	ProcessDesc,
	ProcessRun,
	ScheduleResult,
	build_metrics,
	fresh_runs,
	sort_by_arrival,
)

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 4

FCFS_TITLE = 'FCFS Scheduling'
SJF_TITLE = 'SJF Scheduling (Non-Preemptive)'
PRIORITY_TITLE = 'Priority Scheduling (Non-Preemptive)'

Selector = Callable[[List[ProcessRun]], ProcessRun]


def round_robin_title(quantum: int) -> str:
	return f'Round Robin Scheduling (Time Quantum = {quantum})'


def _advance_idle(gantt: List[GanttSegment], time: int, next_time: int) -> int:
	if next_time > time:
		logger.debug('t=%d idle until %d', time, next_time)
		gantt.append(GanttSegment(IDLE_LABEL, time, next_time))
		return next_time
	return time


def _run_slice(gantt: List[GanttSegment], run: ProcessRun, time: int, length: int) -> int:
	run.mark_dispatched(time)
	run.remaining -= length
	end = time + length
	logger.debug('t=%d dispatch P%d for %d (remaining %d)', time, run.pid, length, run.remaining)
	gantt.append(GanttSegment(run.desc.label, time, end))
	return end


def simulate_fcfs(processes: List[ProcessDesc]) -> ScheduleResult:
	runs = fresh_runs(sort_by_arrival(processes))
	time = 0
	gantt: List[GanttSegment] = []

	for p in runs:
		time = _advance_idle(gantt, time, p.arrival)
		time = _run_slice(gantt, p, time, p.burst)
		p.mark_complete(time)

	return ScheduleResult(title=FCFS_TITLE, processes=build_metrics(runs), gantt=gantt)


def _simulate_non_preemptive(processes: List[ProcessDesc], select: Selector) -> Tuple[List[ProcessRun], List[GanttSegment]]:
	pending = fresh_runs(sort_by_arrival(processes))
	time = 0
	gantt: List[GanttSegment] = []
	finished: List[ProcessRun] = []

	while pending:
		# Candidates keep arrival order so selectors resolve ties to the earliest arrival
		available = [p for p in pending if p.arrival <= time]
		if not available:
			time = _advance_idle(gantt, time, min(p.arrival for p in pending))
			continue

		selected = select(available)
		pending.remove(selected)
		time = _run_slice(gantt, selected, time, selected.burst)
		selected.mark_complete(time)
		finished.append(selected)

	return finished, gantt


def select_shortest_job(available: List[ProcessRun]) -> ProcessRun:
	# min() keeps the first of equal bursts
	return min(available, key=lambda p: p.burst)


def select_highest_priority(available: List[ProcessRun]) -> ProcessRun:
	# Larger value wins; max() keeps the first of equal priorities
	return max(available, key=lambda p: p.priority)


def simulate_sjf(processes: List[ProcessDesc]) -> ScheduleResult:
	finished, gantt = _simulate_non_preemptive(processes, select_shortest_job)
	return ScheduleResult(title=SJF_TITLE, processes=build_metrics(finished), gantt=gantt)


def simulate_priority(processes: List[ProcessDesc]) -> ScheduleResult:
	finished, gantt = _simulate_non_preemptive(processes, select_highest_priority)
	return ScheduleResult(title=PRIORITY_TITLE, processes=build_metrics(finished), gantt=gantt, show_priority=True)


def _admit_arrivals(incoming: List[ProcessRun], ready: Deque[ProcessRun], time: int):
	while incoming and incoming[0].arrival <= time:
		p = incoming.pop(0)
		logger.debug('t=%d admit P%d', time, p.pid)
		ready.append(p)


def simulate_round_robin(processes: List[ProcessDesc], quantum: int = DEFAULT_QUANTUM) -> ScheduleResult:
	"""Round-Robin with a fixed quantum.

	Processes that arrive while a slice is running join the ready queue
	before the preempted process goes back on the tail.
	"""
	if quantum < 1:
		raise ValueError(f'quantum must be at least 1, got {quantum}')

	incoming = fresh_runs(sort_by_arrival(processes))
	ready: Deque[ProcessRun] = deque()
	time = 0
	gantt: List[GanttSegment] = []
	finished: List[ProcessRun] = []

	while ready or incoming:
		if not ready:
			time = _advance_idle(gantt, time, incoming[0].arrival)
			_admit_arrivals(incoming, ready, time)

		current = ready.popleft()
		time = _run_slice(gantt, current, time, min(quantum, current.remaining))
		_admit_arrivals(incoming, ready, time)

		if current.remaining > 0:
			ready.append(current)
		else:
			current.mark_complete(time)
			finished.append(current)

	finished.sort(key=lambda p: p.pid)
	return ScheduleResult(title=round_robin_title(quantum), processes=build_metrics(finished), gantt=gantt)
