# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen command-line interface (Click).

Entry point: [`scalegen.cli.main.cli`][scalegen.cli.main.cli], installed as the
``scalegen`` console script and runnable as ``python -m scalegen``.
"""
