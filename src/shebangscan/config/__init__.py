# topmark:header:start
#
#   project      : ShebangScan
#   file         : __init__.py
#   file_relpath : src/shebangscan/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for ShebangScan.

Submodules:
    - `shebangscan.config.logging`: TRACE-aware logger and colored formatter.
    - `shebangscan.config.loaders`: TOML discovery and parsing (tomlkit).
    - `shebangscan.config.model`: `Config` / `MutableConfig` and merge policy.

This package intentionally re-exports nothing so that importing the logging
module stays free of import cycles.
"""

from __future__ import annotations
