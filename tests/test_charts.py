from os_resource_sim.charts import chart_filename, plot_gantt, save_charts
from os_resource_sim.models import GanttSegment, ScheduleResult
from os_resource_sim.scheduling import simulate_round_robin, simulate_sjf


def test_chart_filename():
	assert chart_filename('Round Robin Scheduling (Time Quantum = 4)') == 'round_robin_scheduling_time_quantum_4.png'
	assert chart_filename('SJF Scheduling (Non-Preemptive)') == 'sjf_scheduling_non_preemptive.png'


def test_plot_gantt_writes_png(tmp_path):
	path = tmp_path / 'trace.png'
	gantt = [GanttSegment('Idle', 0, 2), GanttSegment('P1', 2, 5)]
	assert plot_gantt(gantt, 'Trace', str(path)) == str(path)
	assert path.read_bytes().startswith(b'\x89PNG')


def test_save_charts_skips_empty_runs(tmp_path, textbook_processes):
	results = [
		simulate_sjf(textbook_processes),
		simulate_round_robin(textbook_processes, 4),
		ScheduleResult(title='FCFS Scheduling'),
	]
	written = save_charts(results, str(tmp_path / 'charts'))
	names = sorted(p.rsplit('/', 1)[-1] for p in written)
	assert names == [
		'comparison.png',
		'round_robin_scheduling_time_quantum_4.png',
		'sjf_scheduling_non_preemptive.png',
	]


def test_save_charts_with_nothing_to_plot(tmp_path):
	assert save_charts([ScheduleResult(title='FCFS Scheduling')], str(tmp_path)) == []
