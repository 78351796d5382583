import logging
import re
from typing import Iterable, List, Set

from os_resource_sim.errors import InputNotFoundError, InputUnreadableError, ParseError
from os_resource_sim.models import DEFAULT_MEMORY_REQUIREMENT, ProcessDesc

logger = logging.getLogger(__name__)

FIELD_NAMES = ('pid', 'arrival', 'burst', 'priority', 'memory requirement')

# Signed ASCII decimal only; rejects '1_0', '0x10' and non-ASCII digits
INT_TOKEN = re.compile(r'[+-]?[0-9]+')


def _parse_int(token: str, name: str, line_number: int, line: str) -> int:
	if not INT_TOKEN.fullmatch(token):
		raise ParseError(f'{name} must be an integer, got {token!r}', line_number, line)
	return int(token)


def parse_processes(lines: Iterable[str], default_memory: int = DEFAULT_MEMORY_REQUIREMENT) -> List[ProcessDesc]:
	"""Parse process records, skipping the header line.

	Records are `pid arrival burst priority [memory]`. Lines with fewer than
	four fields are ignored; non-integer or out-of-range fields raise ParseError.
	"""
	processes: List[ProcessDesc] = []
	seen: Set[int] = set()
	for line_number, raw in enumerate(lines, start=1):
		if line_number == 1:
			continue
		line = raw.strip()
		parts = line.split()
		if len(parts) < 4:
			continue

		values = [_parse_int(tok, name, line_number, line) for tok, name in zip(parts[:5], FIELD_NAMES)]
		pid, arrival, burst, priority = values[:4]
		memory = values[4] if len(values) == 5 else default_memory

		if pid <= 0:
			raise ParseError(f'pid must be positive, got {pid}', line_number, line)
		if arrival < 0:
			raise ParseError(f'arrival must not be negative, got {arrival}', line_number, line)
		if burst <= 0:
			raise ParseError(f'burst must be positive, got {burst}', line_number, line)
		if memory <= 0:
			raise ParseError(f'memory requirement must be positive, got {memory}', line_number, line)
		if pid in seen:
			raise ParseError(f'duplicate pid {pid}', line_number, line)
		seen.add(pid)

		processes.append(ProcessDesc(pid=pid, arrival=arrival, burst=burst, priority=priority, memory_requirement=memory))
	return processes


def read_processes(path: str, default_memory: int = DEFAULT_MEMORY_REQUIREMENT) -> List[ProcessDesc]:
	try:
		with open(path, 'r', encoding='utf-8') as fh:
			processes = parse_processes(fh, default_memory=default_memory)
	except FileNotFoundError:
		raise InputNotFoundError(path)
	except UnicodeDecodeError as e:
		raise InputUnreadableError(path, str(e))
	except OSError as e:
		raise InputUnreadableError(path, e.strerror or str(e))
	logger.info('Loaded %d processes from %s', len(processes), path)
	return processes
