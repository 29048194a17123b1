# topmark:header:start
#
#   project      : StyleMark
#   file         : __main__.py
#   file_relpath : src/stylemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running StyleMark via ``python -m stylemark``.

It delegates directly to :func:`stylemark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how StyleMark is launched.

Examples:
    Check a source tree using the module interface::

        python -m stylemark src
"""

from __future__ import annotations

from stylemark.cli.main import cli

if __name__ == "__main__":
    cli()
