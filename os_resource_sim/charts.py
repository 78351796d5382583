import logging
import os
import re
from typing import List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from os_resource_sim.models import GanttSegment, ScheduleResult

logger = logging.getLogger(__name__)

IDLE_COLOR = 'lightgray'
BUSY_COLOR = 'steelblue'


def chart_filename(title: str) -> str:
	slug = re.sub(r'[^a-z0-9]+', '_', title.lower()).strip('_')
	return f'{slug}.png'


def plot_gantt(gantt: List[GanttSegment], title: str, path: str) -> str:
	fig, ax = plt.subplots(figsize=(10, 3))
	y = 0
	for segment in gantt:
		label, start, end = segment
		color = IDLE_COLOR if segment.is_idle else BUSY_COLOR
		ax.barh(y, end - start, left=start, height=0.6, align='center', color=color, edgecolor='black')
		ax.text((start + end) / 2, y, label, va='center', ha='center',
				color='black' if segment.is_idle else 'white', fontsize=8)
	ax.set_xlabel('Time')
	ax.set_ylabel('CPU')
	ax.set_title(title)
	ax.set_yticks([])
	ax.grid(axis='x', linestyle='--', alpha=0.4)
	plt.tight_layout()
	fig.savefig(path)
	plt.close(fig)
	logger.info('Wrote Gantt chart %s', path)
	return path


def plot_average_comparison(results: List[ScheduleResult], path: str) -> str:
	fig, ax = plt.subplots(figsize=(8, 4))
	names = [r.title.split(' Scheduling')[0] for r in results]
	waits = [r.average_waiting for r in results]
	turns = [r.average_turnaround for r in results]
	width = 0.4
	xs = list(range(len(results)))
	ax.bar([x - width / 2 for x in xs], waits, width, label='Waiting', color='gray')
	ax.bar([x + width / 2 for x in xs], turns, width, label='Turnaround', color='seagreen')
	for x, w, t in zip(xs, waits, turns):
		ax.text(x - width / 2, w + 0.5, f'{w:.2f}', ha='center', fontsize=8)
		ax.text(x + width / 2, t + 0.5, f'{t:.2f}', ha='center', fontsize=8)
	ax.set_xticks(xs)
	ax.set_xticklabels(names)
	ax.set_ylabel('Average Time')
	ax.set_title('Scheduler Comparison')
	ax.legend()
	plt.tight_layout()
	fig.savefig(path)
	plt.close(fig)
	logger.info('Wrote comparison chart %s', path)
	return path


def save_charts(results: List[ScheduleResult], chart_dir: str) -> List[str]:
	os.makedirs(chart_dir, exist_ok=True)
	written = []
	for r in results:
		if r.gantt:
			written.append(plot_gantt(r.gantt, r.title, os.path.join(chart_dir, chart_filename(r.title))))
	scheduled = [r for r in results if r.processes]
	if scheduled:
		written.append(plot_average_comparison(scheduled, os.path.join(chart_dir, 'comparison.png')))
	return written
