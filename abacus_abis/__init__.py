"""Extract contract ABIs from compiler build artifacts."""

from .extractor import DEFAULT_CONTRACTS, export_abis, extract_abi

__version__ = "0.1.0"

__all__ = ["DEFAULT_CONTRACTS", "export_abis", "extract_abi"]
