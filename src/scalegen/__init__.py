# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen package.

ScaleGen turns a SCALE/TypeInfo schema (a registry of structural type definitions
plus a list of remote-callable function signatures) into Polkadot.js TypeScript
codec classes and typed call stubs. It exposes both a CLI and a small typed API
(see [`scalegen.api`][scalegen.api]).
"""

from __future__ import annotations
