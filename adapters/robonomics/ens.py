"""ENS naming for Robonomics contracts."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SUFFIX = "eth"


@dataclass(frozen=True)
class EnsSettings:
    """ENS registry and naming scheme for one network."""
    address: str = ""   # registry address; empty => chain default
    suffix: str = ""    # empty => "eth"
    version: int = 5

    @property
    def root_suffix(self) -> str:
        return self.suffix or DEFAULT_SUFFIX

    def contract_name(self, kind: str) -> str:
        """Full ENS name of a robonomics contract, e.g. ``xrt.5.robonomics.eth``."""
        return f"{kind}.{self.version}.robonomics.{self.root_suffix}"
