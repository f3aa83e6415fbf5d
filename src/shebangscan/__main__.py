# topmark:header:start
#
#   project      : ShebangScan
#   file         : __main__.py
#   file_relpath : src/shebangscan/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ShebangScan via ``python -m shebangscan``.

Delegates to :func:`shebangscan.cli.main.cli`, so the module interface and the
``shebangscan`` console script share a single entry point.

Examples:
    Scan a script using the module interface::

        python -m shebangscan scan ./install.sh
"""

from __future__ import annotations

from shebangscan.cli.main import cli

if __name__ == "__main__":
    cli()
