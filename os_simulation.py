"""Interactive entry point: python os_simulation.py (reads ./processes.txt)."""

import sys

from os_resource_sim.cli import main


if __name__ == '__main__':
	sys.exit(main())
