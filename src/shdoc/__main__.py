# topmark:header:start
#
#   project      : shdoc
#   file         : __main__.py
#   file_relpath : src/shdoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running shdoc via ``python -m shdoc``.

It delegates directly to :func:`shdoc.cli.main.cli`, so the module form and the
``shdoc`` console script share one entry point.

Examples:
    Render the documentation of a script::

        python -m shdoc render lib/util.sh
"""

from __future__ import annotations

from shdoc.cli.main import cli

if __name__ == "__main__":
    cli()
