"""
Extract the abi field from compiler build artifacts

Each contract <Name> has its build artifact at
<artifacts_dir>/<Name>.sol/<Name>.json; the value of its top-level "abi"
key is copied verbatim to <output_dir>/<Name>.abi.json.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Union

from .abi_summary import summarize_abi
from .utils.exceptions import (
    AbiWriteError,
    ArtifactNotFoundError,
    ArtifactParseError,
    MissingAbiError,
)

LOG = logging.getLogger(__name__)

DEFAULT_CONTRACTS = ("Inbox", "Outbox", "InterchainGasPaymaster")
DEFAULT_ARTIFACTS_DIR = "artifacts/contracts"
DEFAULT_OUTPUT_DIR = "../../rust/chains/abacus-ethereum/abis"

ABI_KEY = "abi"
ABI_SUFFIX = ".abi.json"


def artifact_path(contract_name: str, artifacts_dir: Union[str, Path]) -> Path:
    """Path of the build artifact for contract_name"""
    return Path(artifacts_dir) / f"{contract_name}.sol" / f"{contract_name}.json"


def abi_path(contract_name: str, output_dir: Union[str, Path]) -> Path:
    """Path of the exported ABI file for contract_name"""
    return Path(output_dir) / f"{contract_name}{ABI_SUFFIX}"


def dump_abi(abi: Any) -> str:
    """Serialize an ABI the same way on every run"""
    return json.dumps(abi, indent=2, ensure_ascii=False) + "\n"


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are accepted by json.load but are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def load_artifact(contract_name: str, path: Path) -> Any:
    """Read and parse a build artifact

    Raises:
        ArtifactNotFoundError: If the file is missing or unreadable
        ArtifactParseError: If the file is not valid UTF-8 JSON
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f, parse_constant=_reject_constant)
    except FileNotFoundError as e:
        raise ArtifactNotFoundError(
            f"Artifact for {contract_name} not found: {path}",
            contract=contract_name,
            path=str(path)
        ) from e
    except OSError as e:
        raise ArtifactNotFoundError(
            f"Artifact for {contract_name} is not readable: {path}: {e}",
            contract=contract_name,
            path=str(path)
        ) from e
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, UnicodeDecodeError and nesting too deep to parse
        raise ArtifactParseError(
            f"Artifact for {contract_name} is not valid JSON: {path}: {e}",
            contract=contract_name,
            path=str(path)
        ) from e


def log_summary(contract_name: str, target: Path, abi: Any):
    """Log entry counts and hashes; a summary failure never fails the export"""
    try:
        summary = summarize_abi(abi)
    except (ValueError, RecursionError) as e:
        LOG.warning(f"Extracted {contract_name} to {target}, but could not summarize its ABI: {e}")
        return

    LOG.info(f"Extracted {contract_name} to {target} ({summary.describe()})")
    for signature, selector in summary.selectors.items():
        LOG.debug(f"  {selector} {signature}")
    for signature, topic in summary.topics.items():
        LOG.debug(f"  {topic} {signature}")


def extract_abi(
    contract_name: str,
    artifacts_dir: Union[str, Path],
    output_dir: Union[str, Path],
) -> Path:
    """
    Copy the abi field of one contract's build artifact to its ABI file.

    The output directory must already exist. Nothing is written unless the
    artifact was read and its abi field found.

    Args:
        contract_name: Contract name, e.g. "Inbox"
        artifacts_dir: Directory containing <Name>.sol/<Name>.json
        output_dir: Directory receiving <Name>.abi.json

    Returns:
        Path of the written ABI file

    Raises:
        ArtifactNotFoundError, ArtifactParseError, MissingAbiError, AbiWriteError
    """
    if not contract_name:
        raise ValueError("contract_name must be a non-empty string")

    source = artifact_path(contract_name, artifacts_dir)
    target = abi_path(contract_name, output_dir)

    artifact = load_artifact(contract_name, source)
    if not isinstance(artifact, dict) or ABI_KEY not in artifact:
        raise MissingAbiError(
            f"Artifact for {contract_name} has no '{ABI_KEY}' field: {source}",
            contract=contract_name,
            path=str(source)
        )

    abi = artifact[ABI_KEY]
    try:
        content = dump_abi(abi).encode('utf-8')
    except (ValueError, RecursionError) as e:
        # Lone surrogates from \uXXXX escapes cannot be written as UTF-8
        raise ArtifactParseError(
            f"ABI of {contract_name} cannot be serialized: {source}: {e}",
            contract=contract_name,
            path=str(source)
        ) from e

    try:
        with open(target, 'wb') as f:
            f.write(content)
    except OSError as e:
        raise AbiWriteError(
            f"Cannot write ABI for {contract_name} to {target}: {e}",
            contract=contract_name,
            path=str(target)
        ) from e

    log_summary(contract_name, target, abi)

    return target


def export_abis(
    contract_names: Iterable[str] = DEFAULT_CONTRACTS,
    artifacts_dir: Union[str, Path] = DEFAULT_ARTIFACTS_DIR,
    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
) -> List[Path]:
    """
    Extract ABIs for contract_names in order, stopping at the first failure.

    Files written before a failure are left in place.

    Returns:
        Paths of the written ABI files, in order
    """
    written = []
    for contract_name in contract_names:
        written.append(extract_abi(contract_name, artifacts_dir, output_dir))
    return written
