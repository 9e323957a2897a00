"""
Pytest fixtures for ABI export tests.

Every test gets a throwaway project layout:

    <tmp>/artifacts/contracts/<Name>.sol/<Name>.json
    <tmp>/abis/
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

INBOX_ABI = [
    {
        "type": "function",
        "name": "process",
        "inputs": [{"name": "_message", "type": "bytes"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "event",
        "name": "Process",
        "inputs": [{"name": "messageHash", "type": "bytes32", "indexed": True}],
        "anonymous": False,
    },
]


@pytest.fixture
def inbox_abi():
    return json.loads(json.dumps(INBOX_ABI))


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    path = tmp_path / "artifacts" / "contracts"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "abis"
    path.mkdir()
    return path


@pytest.fixture
def write_artifact(artifacts_dir: Path) -> Callable[..., Path]:
    """Factory writing <Name>.sol/<Name>.json; raw text is written as-is"""

    def _write(contract_name: str, content: Any = None, raw: str = None) -> Path:
        contract_dir = artifacts_dir / f"{contract_name}.sol"
        contract_dir.mkdir(parents=True, exist_ok=True)
        path = contract_dir / f"{contract_name}.json"
        if raw is None:
            if content is None:
                content = {"abi": INBOX_ABI, "bytecode": "0x6080"}
            raw = json.dumps(content)
        path.write_text(raw, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_package_logger():
    """Undo setup_logging so later tests see records propagate to caplog"""
    names = ("abacus_abis", "web3", "urllib3")
    saved = {name: logging.getLogger(name).level for name in names}
    package = logging.getLogger("abacus_abis")
    yield package
    for handler in list(package.handlers):
        package.removeHandler(handler)
        handler.close()
    package.propagate = True
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
