# topmark:header:start
#
#   project      : ModDoc
#   file         : __init__.py
#   file_relpath : src/moddoc/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utility helpers for ModDoc."""
