"""
Gilu: a conversational task tracker.

Subpackages:
- tasks: task variants and the plain-text task store
- core: command classifier, task-list engine, errors, ports
- connectors: console session driver and presentation surfaces
- cli: command dispatcher, bootstrap and entry point
"""

__version__ = "0.1.0"
