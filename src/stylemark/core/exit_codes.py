# topmark:header:start
#
#   project      : StyleMark
#   file         : exit_codes.py
#   file_relpath : src/stylemark/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for StyleMark.

The exit status only distinguishes three outcomes. Warnings are advisory and
never fail a run; errors are must-fix. Invocation, configuration and I/O
failures share the value ``2``, which is also what Click uses for its own usage
errors, so a bad flag and an unreadable path look the same to automation.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for StyleMark.

    Attributes:
        SUCCESS: No ``error``-severity diagnostic was produced (warnings allowed).
        FAILURE: At least one ``error``-severity diagnostic was produced.
        INVOCATION_ERROR: Invalid flags/arguments, invalid configuration, or an
            unreadable input path.

    Usage:
        ```python
        import subprocess
        from stylemark.core.exit_codes import ExitCode

        result = subprocess.run(["stylemark", "src"])
        if result.returncode == ExitCode.FAILURE:
            print("Style errors must be fixed.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    INVOCATION_ERROR = 2
