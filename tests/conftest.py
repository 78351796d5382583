import pytest

from os_resource_sim.models import ProcessDesc


@pytest.fixture
def textbook_processes():
	# pid, arrival, burst, priority
	return [
		ProcessDesc(1, 0, 5, 1),
		ProcessDesc(2, 1, 3, 2),
		ProcessDesc(3, 2, 8, 1),
		ProcessDesc(4, 3, 6, 3),
	]


@pytest.fixture
def process_file(tmp_path, monkeypatch):
	"""Write processes.txt into a scratch cwd and return its path."""
	monkeypatch.chdir(tmp_path)

	def write(text):
		path = tmp_path / 'processes.txt'
		path.write_text(text)
		return path
	return write


def _scripted(*answers):
	"""Stand-in for input() that replays answers, then hits EOF."""
	remaining = list(answers)

	def read(prompt):
		print(prompt, end='')
		if not remaining:
			raise EOFError
		return remaining.pop(0)
	return read


@pytest.fixture
def scripted():
	return _scripted
