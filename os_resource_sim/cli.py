import logging
import os
import random
import sys
from typing import Callable, List, Mapping, Optional, Tuple

from os_resource_sim.config import SimulationConfig
from os_resource_sim.errors import SimulationError
from os_resource_sim.loader import read_processes
from os_resource_sim.memory import simulate_memory_allocation
from os_resource_sim.models import ProcessDesc, ScheduleResult, sort_by_arrival
from os_resource_sim.paging import simulate_paging_fifo, simulate_paging_lru
from os_resource_sim.report import SEPARATOR, print_allocation_report, print_paging_summary, print_schedule
from os_resource_sim.scheduling import simulate_fcfs, simulate_priority, simulate_round_robin, simulate_sjf

logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT = 2

Policy = Callable[[List[ProcessDesc]], ScheduleResult]


def ask_yes_no(prompt: str, read: Callable[[str], str] = input) -> bool:
	while True:
		try:
			answer = read(prompt).strip().lower()
		except EOFError:
			print()
			return False
		if answer == 'y':
			return True
		if answer == 'n':
			return False
		print("Invalid option. Please enter 'y' or 'n'.")


def load_processes(path: str, default_memory: int) -> List[ProcessDesc]:
	print(f'Reading file from: {os.path.abspath(path)}')
	try:
		return read_processes(path, default_memory=default_memory)
	except SimulationError as e:
		logger.info('Falling back to an empty process set: %s', e)
		print(f'Error: {e}')
		return []


def scheduling_policies(config: SimulationConfig) -> List[Tuple[str, Policy]]:
	return [
		('Run FCFS Scheduling? (y/n): ', simulate_fcfs),
		('Run SJF Scheduling? (y/n): ', simulate_sjf),
		('Run Round Robin Scheduling? (y/n): ', lambda ps: simulate_round_robin(ps, config.time_quantum)),
		('Run Priority Scheduling? (y/n): ', simulate_priority),
	]


def run_schedulers(processes: List[ProcessDesc], config: SimulationConfig,
				   read: Callable[[str], str] = input) -> List[ScheduleResult]:
	results: List[ScheduleResult] = []
	for prompt, policy in scheduling_policies(config):
		if ask_yes_no(prompt, read):
			result = policy(processes)
			print_schedule(result)
			print(f'\n{SEPARATOR}\n')
			results.append(result)
	return results


def run_resource_demos(processes: List[ProcessDesc], config: SimulationConfig):
	print('\nMemory Allocation Simulation:')
	report = simulate_memory_allocation(
		processes,
		rng=random.Random(config.seed),
		size_range=config.hole_size_range,
		gap=config.hole_gap
	)
	print_allocation_report(report)

	fifo_faults = simulate_paging_fifo(config.page_references, config.num_frames)
	lru_faults = simulate_paging_lru(config.page_references, config.num_frames)
	print_paging_summary(fifo_faults, lru_faults)


def main(environ: Optional[Mapping[str, str]] = None, read: Callable[[str], str] = input) -> int:
	try:
		config = SimulationConfig.from_env(environ)
	except ValueError as e:
		print(f'Error: {e}', file=sys.stderr)
		return CONFIG_ERROR_EXIT
	logging.basicConfig(format='%(levelname)s: %(message)s', level=config.log_level, stream=sys.stderr)

	print(f'The processes file is located at: {os.path.abspath(config.process_file)}')
	if not ask_yes_no('Do you want to run the program using this file? (y/n): ', read):
		print('Exiting program.')
		return 0

	processes = load_processes(config.process_file, config.default_memory)
	results: List[ScheduleResult] = []
	if not processes:
		print('No processes to schedule. Please check your processes.txt file.')
	else:
		processes = sort_by_arrival(processes)
		results = run_schedulers(processes, config, read)

	if config.chart_dir and results:
		from os_resource_sim.charts import save_charts
		save_charts(results, config.chart_dir)

	run_resource_demos(processes, config)
	return 0
