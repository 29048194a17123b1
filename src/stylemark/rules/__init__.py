# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style rules.

Each rule lives in a thematic module and is registered, in evaluation order, in
[`stylemark.rules.registry`][stylemark.rules.registry]. Rule identifiers are
defined in [`stylemark.rules.ids`][stylemark.rules.ids], which has no
dependencies so that the configuration layer can validate rule ids cheaply.
"""
