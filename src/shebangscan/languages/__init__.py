# topmark:header:start
#
#   project      : ShebangScan
#   file         : __init__.py
#   file_relpath : src/shebangscan/languages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language definitions, registry and file language detection."""
