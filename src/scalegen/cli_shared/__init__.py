# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic helpers shared by CLI front-ends."""
