from typing import Optional


class SimulationError(Exception):
	"""Base class for recoverable input problems."""


class InputNotFoundError(SimulationError):
	def __init__(self, path: str):
		super().__init__(f'File {path} not found.')
		self.path = path


class InputUnreadableError(SimulationError):
	def __init__(self, path: str, reason: str):
		super().__init__(f'Could not read {path}: {reason}')
		self.path = path
		self.reason = reason


class ParseError(SimulationError, ValueError):
	def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
		if line_number is not None:
			message = f'line {line_number}: {message}'
		super().__init__(message)
		self.line_number = line_number
		self.line = line
