# topmark:header:start
#
#   project      : ShebangScan
#   file         : config_resolver.py
#   file_relpath : src/shebangscan/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective configuration from Click options."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from shebangscan.cli.errors import ShebangScanConfigError
from shebangscan.config.loaders import ConfigError
from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.config.model import CollationMode, Config, MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: ShebangScanLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    config_paths: Iterable[str],
    no_config: bool,
    merge_config: bool = False,
    directory: Path | None = None,
) -> Config:
    """Merge defaults, discovered files and ``--config`` files into a frozen config.

    Args:
        config_paths (Iterable[str]): Values of ``--config``, in order.
        no_config (bool): Value of ``--no-config``.
        merge_config (bool): Value of ``--merge-config``; unions extensions across layers.
        directory (Path | None): Discovery directory (CWD if None).

    Returns:
        Config: The effective configuration.

    Raises:
        ShebangScanConfigError: If any configuration source is missing or invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            directory=directory,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
            collation=CollationMode.MERGE if merge_config else CollationMode.REVISE,
        )
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise ShebangScanConfigError(str(e)) from e
    return draft.freeze()
