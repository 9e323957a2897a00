#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List, Optional

from .extractor import export_abis
from .utils.config_manager import ConfigManager
from .utils.exceptions import ConfigurationError, ExtractionError
from .utils.logging import setup_logging

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Copy the abi field of contract build artifacts to <Name>.abi.json files"
    )
    parser.add_argument("--config", default=None,
                        help="Path to a JSON or YAML configuration file")
    parser.add_argument("--artifacts-dir", default=None,
                        help="Directory containing <Name>.sol/<Name>.json build artifacts")
    parser.add_argument("--output-dir", default=None,
                        help="Existing directory receiving <Name>.abi.json files")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution flow"""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    try:
        config = ConfigManager().load(args.config)
    except ConfigurationError as e:
        LOG.error(f"Failed to load configuration: {e}")
        return 2

    config = config.with_overrides(
        artifacts_dir=args.artifacts_dir,
        output_dir=args.output_dir,
    )
    LOG.debug(f"Exporting {config.contracts} from {config.artifacts_dir} to {config.output_dir}")

    try:
        written = export_abis(config.contracts, config.artifacts_dir, config.output_dir)
    except ExtractionError as e:
        LOG.error(f"{e.kind} while exporting {e.contract}: {e}")
        return 1

    LOG.info(f"Exported {len(written)} ABI files to {config.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
