import pytest

from os_resource_sim.errors import InputNotFoundError, InputUnreadableError, ParseError
from os_resource_sim.loader import parse_processes, read_processes
from os_resource_sim.models import ProcessDesc


def test_parse_skips_header_blank_and_short_lines():
	lines = [
		'PID Arrival Burst Priority Memory\n',
		'1 0 5 1 120\n',
		'\n',
		'   \n',
		'2 1 3\n',
		'  3   2 8 1  \n',
	]
	assert parse_processes(lines) == [
		ProcessDesc(1, 0, 5, 1, 120),
		ProcessDesc(3, 2, 8, 1, 100),
	]


def test_header_is_ignored_even_if_numeric():
	assert parse_processes(['9 9 9 9', '1 0 5 1']) == [ProcessDesc(1, 0, 5, 1)]


def test_default_memory_can_be_overridden():
	assert parse_processes(['hdr', '1 0 5 1'], default_memory=64)[0].memory_requirement == 64


def test_non_integer_field_raises_parse_error():
	with pytest.raises(ParseError) as excinfo:
		parse_processes(['hdr', '1 0 5 1', '2 x 3 1'])
	assert excinfo.value.line_number == 3
	assert 'arrival must be an integer' in str(excinfo.value)
	assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize('line,name', [
	('1 0 1_0 1', 'burst'),
	('1 0x1 5 1', 'arrival'),
	('1 0 5 1.5', 'priority'),
	('١ 0 5 1', 'pid'),
	('1 0 5 1 1_00', 'memory requirement'),
])
def test_integer_lookalikes_raise_parse_error(line, name):
	with pytest.raises(ParseError, match=f'{name} must be an integer'):
		parse_processes(['hdr', line])


def test_signed_integers_are_accepted():
	assert parse_processes(['hdr', '+1 0 5 -2']) == [ProcessDesc(1, 0, 5, -2)]


def test_non_integer_memory_raises_parse_error():
	with pytest.raises(ParseError, match='memory requirement'):
		parse_processes(['hdr', '1 0 5 1 lots'])


@pytest.mark.parametrize('line,message', [
	('0 0 5 1', 'pid must be positive'),
	('1 -1 5 1', 'arrival must not be negative'),
	('1 0 0 1', 'burst must be positive'),
	('1 0 5 1 0', 'memory requirement must be positive'),
])
def test_out_of_range_fields_raise_parse_error(line, message):
	with pytest.raises(ParseError, match=message):
		parse_processes(['hdr', line])


def test_duplicate_pid_raises_parse_error():
	with pytest.raises(ParseError, match='duplicate pid 1'):
		parse_processes(['hdr', '1 0 5 1', '1 2 3 1'])


def test_read_processes_from_disk(tmp_path):
	path = tmp_path / 'processes.txt'
	path.write_text('PID Arrival Burst Priority\n4 3 6 3\n1 0 5 1\n')
	# Order is preserved; sorting by arrival is the caller's job
	assert read_processes(str(path)) == [ProcessDesc(4, 3, 6, 3), ProcessDesc(1, 0, 5, 1)]


def test_read_processes_missing_file(tmp_path):
	with pytest.raises(InputNotFoundError) as excinfo:
		read_processes(str(tmp_path / 'nope.txt'))
	assert 'not found' in str(excinfo.value)


def test_read_processes_on_directory(tmp_path):
	with pytest.raises(InputUnreadableError):
		read_processes(str(tmp_path))


def test_read_processes_empty_file(tmp_path):
	path = tmp_path / 'processes.txt'
	path.write_text('')
	assert read_processes(str(path)) == []
