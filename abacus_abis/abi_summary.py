"""
Human-readable summary of an extracted ABI

Only used for logging: counts entries by type and computes function
selectors and event topics. Entries it cannot make sense of are counted
as "other" and never cause an error.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from web3 import Web3


@dataclass
class AbiSummary:
    """Entry counts and hashes of one ABI"""
    functions: int = 0
    events: int = 0
    errors: int = 0
    other: int = 0
    selectors: Dict[str, str] = field(default_factory=dict)
    topics: Dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.functions + self.events + self.errors + self.other

    def describe(self) -> str:
        return (
            f"{self.total} entries: {self.functions} functions, "
            f"{self.events} events, {self.errors} errors"
        )


def canonical_type(param: Dict[str, Any]) -> Optional[str]:
    """Canonical ABI type of a parameter, expanding tuples from their components"""
    type_name = param.get("type")
    if not isinstance(type_name, str):
        return None
    if not type_name.startswith("tuple"):
        return type_name

    components = param.get("components")
    if not isinstance(components, list):
        return None
    inner = []
    for component in components:
        if not isinstance(component, dict):
            return None
        component_type = canonical_type(component)
        if component_type is None:
            return None
        inner.append(component_type)
    # Keep array suffixes such as "[]" or "[2][]"
    return f"({','.join(inner)}){type_name[len('tuple'):]}"


def entry_signature(entry: Dict[str, Any]) -> Optional[str]:
    """Signature such as "transfer(address,uint256)", or None for malformed entries"""
    name = entry.get("name")
    inputs = entry.get("inputs", [])
    if not isinstance(name, str) or not name or not isinstance(inputs, list):
        return None

    types: List[str] = []
    for param in inputs:
        if not isinstance(param, dict):
            return None
        param_type = canonical_type(param)
        if param_type is None:
            return None
        types.append(param_type)
    return f"{name}({','.join(types)})"


def function_selector(signature: str) -> str:
    """First 4 bytes of keccak256(signature), 0x-prefixed"""
    return Web3.to_hex(Web3.keccak(text=signature))[:10]


def event_topic(signature: str) -> str:
    """keccak256(signature), 0x-prefixed"""
    return Web3.to_hex(Web3.keccak(text=signature))


def summarize_abi(abi: Any) -> AbiSummary:
    summary = AbiSummary()
    if not isinstance(abi, list):
        summary.other = 1
        return summary

    for entry in abi:
        entry_type = entry.get("type") if isinstance(entry, dict) else None
        if entry_type == "function":
            summary.functions += 1
            signature = entry_signature(entry)
            if signature:
                summary.selectors[signature] = function_selector(signature)
        elif entry_type == "event":
            summary.events += 1
            signature = entry_signature(entry)
            if signature and not entry.get("anonymous", False):
                summary.topics[signature] = event_topic(signature)
        elif entry_type == "error":
            summary.errors += 1
        else:
            # constructor, fallback, receive and anything unrecognized
            summary.other += 1

    return summary
