# topmark:header:start
#
#   project      : ScaleGen
#   file         : __main__.py
#   file_relpath : src/scalegen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ScaleGen via ``python -m scalegen``.

It delegates directly to :func:`scalegen.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ScaleGen is launched.

Examples:
    Generate code for a schema using the module interface::

        python -m scalegen generate schema.json
"""

from __future__ import annotations

from scalegen.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
