"""Teaching simulator for CPU scheduling, first-fit allocation and page replacement."""

from os_resource_sim.models import GanttSegment, ProcessDesc, ScheduleResult
from os_resource_sim.scheduling import simulate_fcfs, simulate_priority, simulate_round_robin, simulate_sjf

__version__ = '0.1.0'
