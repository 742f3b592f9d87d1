# topmark:header:start
#
#   project      : ModDoc
#   file         : __init__.py
#   file_relpath : src/moddoc/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command line interface for ModDoc."""
