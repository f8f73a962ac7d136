"""Catalogue of IDEs that can open a start-work deep link.

Public API::

    from startwork.ides import default_registry

    registry = default_registry()
    ide = registry.resolve("jb-pycharm")
    print(ide.protocol)  # jetbrains://pycharm/codestream/
"""

from __future__ import annotations

from startwork.ides.registry import IDE_RECORDS, IDERecord, IDERegistry, default_registry

__all__ = [
    "IDE_RECORDS",
    "IDERecord",
    "IDERegistry",
    "default_registry",
]
