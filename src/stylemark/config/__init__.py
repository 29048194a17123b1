# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for StyleMark.

Modules:
    * `stylemark.config.model`: `RuleConfig` (frozen runtime snapshot) and
      `MutableRuleConfig` (builder used while merging layers).
    * `stylemark.config.loaders`: TOML discovery, loading and rendering.
    * `stylemark.config.keys`: canonical TOML section and key names.
    * `stylemark.config.logging`: logger class and logging setup.

This package module stays import-light on purpose: every other StyleMark module
imports `stylemark.config.logging`, so re-exporting the model here would create
import cycles.
"""

from __future__ import annotations
