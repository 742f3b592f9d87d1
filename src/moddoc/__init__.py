# topmark:header:start
#
#   project      : ModDoc
#   file         : __init__.py
#   file_relpath : src/moddoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ModDoc package.

ModDoc prepends module documentation comments to source files. A small mapping
file (``modoc.config``) names which source files each Markdown document
documents; every run replaces the previously generated comment block with the
current Markdown content.
"""

from __future__ import annotations
