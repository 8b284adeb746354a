from __future__ import annotations

import pytest
from web3 import Web3

from adapters.messaging.ipfs.provider import MessageProviderIpfs
from adapters.robonomics import EnsSettings, Robonomics
from config.config import RUN
from domains.robonomics.exceptions import EnsResolutionError
from domains.robonomics.messages import Demand, Offer, Result, message_hash
from tests.utils.mocks.robonomics import (
    ACCOUNT,
    LIGHTHOUSE_ADDRESS,
    SIGNATURE,
    XRT_ADDRESS,
    FakeIpfs,
    frame,
)

LIGHTHOUSE = "airalab.lighthouse.5.robonomics.eth"


def _client(ipfs, web3, *, ens=None, token=None):
    return Robonomics(
        web3=web3,
        account=ACCOUNT,
        ens=ens or EnsSettings(),
        message_provider=MessageProviderIpfs(ipfs),
        lighthouse=LIGHTHOUSE,
        token=token,
    )


def _demand():
    return Demand(
        model=RUN["model"],
        objective=RUN["objectives"]["24h"]["objective"],
        token=XRT_ADDRESS,
        cost=0,
        lighthouse=LIGHTHOUSE_ADDRESS,
        deadline=1000,
    )


def test_ens_contract_names():
    assert EnsSettings().contract_name("xrt") == "xrt.5.robonomics.eth"
    assert EnsSettings(suffix="sid", version=5).contract_name("factory") == "factory.5.robonomics.sid"


def test_resolve_uses_default_registry_and_caches(fake_ipfs, fake_web3, fake_ens):
    client = _client(fake_ipfs, fake_web3)

    assert client.lighthouse_address == LIGHTHOUSE_ADDRESS
    assert client.lighthouse_address == LIGHTHOUSE_ADDRESS
    assert fake_ens.ns.lookups == [LIGHTHOUSE]
    assert fake_ens.registries == [None]


def test_resolve_uses_custom_registry(fake_ipfs, fake_web3, fake_ens):
    registry = "0xaC4Ac4801b50b74aa3222B5Ba282FF54407B3941"
    client = _client(fake_ipfs, fake_web3, ens=EnsSettings(address=registry, suffix="sid"))

    assert client.token_address == XRT_ADDRESS
    assert fake_ens.registries == [registry]
    assert fake_ens.ns.lookups == ["xrt.5.robonomics.sid"]


def test_unresolved_name_raises(fake_ipfs, fake_web3, fake_ens):
    client = _client(fake_ipfs, fake_web3)
    with pytest.raises(EnsResolutionError):
        client.resolve("missing.robonomics.eth")


def test_configured_token_skips_ens(fake_ipfs, fake_web3, fake_ens):
    client = _client(fake_ipfs, fake_web3, token=XRT_ADDRESS.lower())
    assert client.token_address == XRT_ADDRESS
    assert fake_ens.ns.lookups == []


def test_send_demand_signs_and_publishes(fake_ipfs, fake_web3):
    client = _client(fake_ipfs, fake_web3)

    sent = client.send_demand(_demand())

    assert sent.sender == ACCOUNT
    assert sent.signature == Web3.to_hex(SIGNATURE)
    assert fake_web3.eth.signed == [(ACCOUNT, message_hash(sent))]

    [(topic, _payload)] = fake_ipfs.pubsub.published
    assert topic == LIGHTHOUSE
    [payload] = fake_ipfs.published_payloads()
    assert payload["kind"] == "demand"
    assert payload["sender"] == ACCOUNT
    assert payload["signature"] == sent.signature


def test_send_result_keeps_liability(fake_ipfs, fake_web3):
    client = _client(fake_ipfs, fake_web3)
    result = client.send_result(Result(liability=LIGHTHOUSE_ADDRESS, result=RUN["model"], success=False))

    [payload] = fake_ipfs.published_payloads()
    assert payload["kind"] == "result"
    assert payload["liability"] == LIGHTHOUSE_ADDRESS
    assert payload["success"] is False
    assert result.signature is not None


def test_on_offer_filters_kind_and_skips_malformed(fake_web3):
    offer = Offer(
        model=RUN["model"],
        objective=RUN["objectives"]["1h"]["objective"],
        token=XRT_ADDRESS,
        cost=10,
        lighthouse=LIGHTHOUSE_ADDRESS,
        deadline=2000,
    )
    ipfs = FakeIpfs(
        frames=[
            frame(_demand().to_dict()),
            frame({"kind": "offer", "model": RUN["model"]}),
            frame(offer.to_dict()),
        ]
    )
    client = _client(ipfs, fake_web3)
    received = []

    subscription = client.on_offer(received.append)
    assert subscription.wait(2.0)

    assert received == [offer]


def test_peers_and_close(fake_ipfs, fake_web3):
    client = _client(fake_ipfs, fake_web3)
    client.on_demand(lambda _m: None)

    assert client.peers() == ["QmPeerA", "QmPeerB"]
    client.close()
    assert all(channel.closed for channel in fake_ipfs.pubsub.channels)


def test_on_offer_skips_mistyped_fields(fake_web3):
    offer = Offer(
        model=RUN["model"],
        objective=RUN["objectives"]["60s"]["objective"],
        token=XRT_ADDRESS,
        cost=3,
        lighthouse=LIGHTHOUSE_ADDRESS,
        deadline=500,
    )
    bad_cost = dict(offer.to_dict(), cost="lots")
    bad_token = dict(offer.to_dict(), token="xrt")
    ipfs = FakeIpfs(frames=[frame(bad_cost), frame(bad_token), frame(offer.to_dict())])
    client = _client(ipfs, fake_web3)
    received = []

    subscription = client.on_offer(received.append)
    assert subscription.wait(2.0)

    assert received == [offer]
