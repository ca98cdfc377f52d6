"""
Target naming and file operations for identified media.

Package organization:
- formatter: Renders a target name from a naming template and a `ParsedFile`.
- batch: Scans folders, plans the operation for every identified file and
  renames, moves, copies or links it.

Public API (top-level exports)
- `target_name`: Rendered target name for a `ParsedFile`, extension included.
- `run`: Identify and act on a file or folder.
- `execute`: Carry out a single planned operation.

Behavior notes:
- Existing targets are never overwritten.
- Unclassified files are skipped by the batch and keep their name in the renderer.
"""
from .formatter import target_name
from .batch import FileOperationError, PlannedOperation, execute, plan, plan_file, run, scan

__all__ = [
    "target_name",
    "FileOperationError",
    "PlannedOperation",
    "execute",
    "plan",
    "plan_file",
    "run",
    "scan",
]
