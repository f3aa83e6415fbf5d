# topmark:header:start
#
#   project      : ShebangScan
#   file         : __init__.py
#   file_relpath : src/shebangscan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan package.

ShebangScan is the shebang-based language-detection front end of a formatting
pipeline. It splits a shell script into its shebang line and its body, classifies
the interpreter, and exposes the injection tag a downstream grammar selector uses
to parse the body. It ships both a small typed API and a CLI.
"""

from __future__ import annotations
