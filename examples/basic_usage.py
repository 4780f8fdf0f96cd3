#!/usr/bin/env python3
"""
Example: Basic usage of DStat as a Python library
"""

from dstat import PathRegistry, TypeTally, scan_directory
from dstat.formatters import get_formatter

# Register the directories to examine
registry = PathRegistry()
registry.add("/tmp")
registry.add(".")

# Counts accumulate across every scanned directory
tally = TypeTally()
for path in registry:
    scan_directory(path, tally)

print(get_formatter("block").format(registry.paths, tally), end="")
print(f"Scanned {tally.total} entries in {registry.count} directories")
