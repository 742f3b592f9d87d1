# topmark:header:start
#
#   project      : ModDoc
#   file         : __main__.py
#   file_relpath : src/moddoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ModDoc via ``python -m moddoc``.

It delegates directly to :func:`moddoc.cli.main.cli`, so the module interface
and the ``moddoc`` console script behave identically.

Examples:
    Apply every configured mapping in the current directory::

        python -m moddoc
"""

from __future__ import annotations

from moddoc.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
