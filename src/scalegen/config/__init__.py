# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for ScaleGen.

Modules:
    - [`scalegen.config.model`][scalegen.config.model]: the immutable `Config`
      snapshot and its `MutableConfig` builder.
    - [`scalegen.config.logging`][scalegen.config.logging]: logging setup.
    - [`scalegen.config.io`][scalegen.config.io]: TOML loading and rendering.

This package module stays import-free: `scalegen.config.logging` is imported by
nearly every module, including the diagnostics used by the config model.
"""

from __future__ import annotations
