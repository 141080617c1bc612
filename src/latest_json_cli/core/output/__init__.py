"""Output strategy module for unified CLI output with verbosity contracts.

========  =========  =====================================
Level     Flag       User Sees
========  =========  =====================================
NORMAL    (default)  Progress, results, errors, warnings
VERBOSE   -v         + Per-artifact details
DEBUG     -vvv       + Debug messages, tracebacks
========  =========  =====================================
"""

from latest_json_cli.core.output.strategy import OutputStrategy
from latest_json_cli.core.output.verbosity import Verbosity

__all__ = [
    "OutputStrategy",
    "Verbosity",
]
