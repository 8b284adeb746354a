"""Common lightweight fixtures shared across unit test suites."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from tests.utils.mocks.robonomics import (
    LIGHTHOUSE_ADDRESS,
    XRT_ADDRESS,
    FakeIpfs,
    FakeNS,
    make_web3,
)


@pytest.fixture
def fake_ipfs() -> FakeIpfs:
    return FakeIpfs()


@pytest.fixture
def fake_web3() -> SimpleNamespace:
    return make_web3()


@pytest.fixture
def fake_ens(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Replace ens.ENS in the client module; records registry addresses used."""

    from adapters.robonomics import client as client_module

    ns = FakeNS(
        {
            "airalab.lighthouse.5.robonomics.eth": LIGHTHOUSE_ADDRESS,
            "airalab.lighthouse.5.robonomics.sid": LIGHTHOUSE_ADDRESS,
            "xrt.5.robonomics.eth": XRT_ADDRESS,
            "xrt.5.robonomics.sid": XRT_ADDRESS,
        }
    )
    registries: List[Optional[str]] = []

    def _from_web3(w3: Any, addr: Optional[str] = None) -> FakeNS:
        registries.append(addr)
        return ns

    monkeypatch.setattr(client_module, "ENS", SimpleNamespace(from_web3=_from_web3))
    return SimpleNamespace(ns=ns, registries=registries)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """Remove dapp-related variables so from_env() sees defaults."""

    for name in (
        "ROBONOMICS_NETWORK_ID",
        "IPFS_API_ADDR",
        "IPFS_TIMEOUT_S",
        "WEB3_PROVIDER_URI",
        "WEB3_TIMEOUT_S",
        "ROBONOMICS_ACCOUNT",
        "IPFS_DIAL_BOOTSTRAP",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return {}
