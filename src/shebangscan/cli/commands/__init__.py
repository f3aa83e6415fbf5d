# topmark:header:start
#
#   project      : ShebangScan
#   file         : __init__.py
#   file_relpath : src/shebangscan/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan CLI subcommands."""
