"""devseed: scaffold lint, editor, and git configuration into a JavaScript project.

Import from submodules:
- version: __version__
- core.seed: run_seed (the full scaffolding sequence)
"""

from devseed.version import __version__ as __version__
