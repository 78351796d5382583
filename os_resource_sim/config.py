import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from os_resource_sim.models import DEFAULT_MEMORY_REQUIREMENT


DEFAULT_PAGE_REFERENCES = (7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2)


@dataclass
class SimulationConfig:
	process_file: str = 'processes.txt'
	time_quantum: int = 4
	default_memory: int = DEFAULT_MEMORY_REQUIREMENT
	hole_size_range: Tuple[int, int] = (100, 200)
	hole_gap: int = 10
	page_references: Tuple[int, ...] = DEFAULT_PAGE_REFERENCES
	num_frames: int = 3
	seed: Optional[int] = None
	chart_dir: Optional[str] = None
	log_level: str = 'WARNING'

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SimulationConfig':
		"""Build a config, letting OS_SIM_* environment variables override defaults.

		The CLI takes no flags, so the environment is the only knob:
		OS_SIM_PROCESS_FILE, OS_SIM_SEED, OS_SIM_CHART_DIR and OS_SIM_LOG_LEVEL.
		"""
		if environ is None:
			environ = os.environ
		config = cls()
		if environ.get('OS_SIM_PROCESS_FILE'):
			config.process_file = environ['OS_SIM_PROCESS_FILE']
		if environ.get('OS_SIM_SEED'):
			try:
				config.seed = int(environ['OS_SIM_SEED'])
			except ValueError:
				raise ValueError(f"OS_SIM_SEED must be an integer, got {environ['OS_SIM_SEED']!r}")
		if environ.get('OS_SIM_CHART_DIR'):
			config.chart_dir = environ['OS_SIM_CHART_DIR']
		if environ.get('OS_SIM_LOG_LEVEL'):
			level = environ['OS_SIM_LOG_LEVEL'].strip().upper()
			if not isinstance(logging.getLevelName(level), int):
				raise ValueError(f"OS_SIM_LOG_LEVEL must be a logging level name, got {environ['OS_SIM_LOG_LEVEL']!r}")
			config.log_level = level
		return config
