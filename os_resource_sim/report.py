from typing import List

from os_resource_sim.memory import AllocationReport
from os_resource_sim.models import GanttSegment, ProcessMetrics, ScheduleResult

BLOCK_WIDTH = 6
SEPARATOR = '--------------------'
NO_PROCESSES = 'No processes to schedule.'
NO_GANTT = 'No Gantt chart to display.'
ALLOCATION_HEADER = 'Memory Allocation Simulation using FIRST_FIT (Automatically Generated Memory Holes):'


def format_gantt_chart(gantt: List[GanttSegment]) -> str:
	if not gantt:
		return NO_GANTT
	top = ''.join(f'|{seg.label:<{BLOCK_WIDTH}}' for seg in gantt)
	bottom = ''.join(f'|{seg.start:<{BLOCK_WIDTH}}' for seg in gantt)
	bottom += f'Finish:{gantt[-1].finish}'
	return '\n'.join(['Gantt Chart:', top, bottom])


def format_process_line(m: ProcessMetrics, show_priority: bool = False) -> str:
	line = (f'PID: {m.pid:<3} | CPU Init: {m.cpu_init:<3} | '
			f'Waiting Time: {m.waiting:<3} | Turnaround Time: {m.turnaround:<3}')
	if show_priority:
		line += f' | Priority: {m.priority}'
	return line


def format_schedule(result: ScheduleResult) -> str:
	lines = [f'--- {result.title} ---']
	if not result.processes:
		lines.append(NO_PROCESSES)
		return '\n'.join(lines)
	lines.append('')
	lines.append(format_gantt_chart(result.gantt))
	for m in result.processes:
		lines.append(format_process_line(m, result.show_priority))
	lines.append(f'Average Waiting Time: {result.average_waiting:.2f}')
	lines.append(f'Average Turnaround Time: {result.average_turnaround:.2f}')
	return '\n'.join(lines)


def print_schedule(result: ScheduleResult):
	print()
	print(format_schedule(result))


def format_allocation_report(report: AllocationReport) -> str:
	lines = [ALLOCATION_HEADER]
	for a in report.allocations:
		if a.succeeded:
			lines.append(f'Process {a.pid} (memory request: {a.request}) '
						 f'allocated at address {a.block.start} with size {a.block.size}')
		else:
			lines.append(f'Process {a.pid} allocation of size {a.request} failed.')
	lines.append('Remaining free holes:')
	for hole in report.holes:
		lines.append(f'Start: {hole.start}, Size: {hole.size}')
	return '\n'.join(lines)


def print_allocation_report(report: AllocationReport):
	print()
	print(format_allocation_report(report))


def format_paging_summary(fifo_faults: int, lru_faults: int) -> str:
	return '\n'.join([
		'Paging Simulation:',
		f'FIFO Page Faults: {fifo_faults}',
		f'LRU Page Faults: {lru_faults}',
	])


def print_paging_summary(fifo_faults: int, lru_faults: int):
	print()
	print(format_paging_summary(fifo_faults, lru_faults))
