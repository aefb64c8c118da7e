# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen CLI commands."""
