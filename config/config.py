# config/config.py
# Static network, model and IPFS settings for the weather dapp.
#
# Values here are read-only. Typed views live in domains.robonomics.models;
# callers that need to hand IPFS_CONFIG to a client should use
# domains.robonomics.models.ipfs_node_config() to get a private copy.

# ENS contract version used to build robonomics contract names
VERSION = 5

# Network profiles keyed by chain id
ROBONOMICS = {
    1: {
        "ens": "",
        "ens_suffix": "",
        "lighthouse": "airalab.lighthouse.5.robonomics.eth",
    },
    4451: {
        "ens": "0xaC4Ac4801b50b74aa3222B5Ba282FF54407B3941",
        "ens_suffix": "sid",
        "lighthouse": "airalab.lighthouse.5.robonomics.sid",
    },
}

MODEL_TRADE = "Qmd6bn2JGW26hSx7g5gVCmfgB7uigRPrhAukJn77ee3bMM"
OBJECTIVE_TRADE = "QmVAFgUxBitKqtV2sjaYcHkKfcAPVy3GswhaE5n5bcgLkf"
OFFERS_API = "https://devjs-01.corp.aira.life:3024/"

# None => resolve xrt.<VERSION>.robonomics.<suffix> through ENS
TOKEN = None
TOKEN_SYMBOL = "XRT"
TOKEN_DECIMALS = 9
PRICE = 0

# Sensor publishing runs, one objective per reporting interval
RUN = {
    "model": "QmPVr7k4N2jNiCYjbvQWPcmxzm5jwY3ZHEuJMgbQLmPKvY",
    "objectives": {
        "1h": {
            "objective": "QmPtwRTjPmvBweSmG4zVGtUc9KWxLsPp76xERvjUXFJWEz",
            "label": "1h",
        },
        "24h": {
            "objective": "QmbYXWWhNtnjhhBTvs2UfHiFLTUsXSZsoLoKSufiZHPxvR",
            "label": "24h",
        },
        "60s": {
            "objective": "QmYijVc27M27WyS1UiAB72GmeDBKVo2Nyvh1EYXUBZUNJb",
            "label": "60s",
        },
    },
}

# Vane control commands
ACTION = {
    "model": "QmNeMoBUiYjk4VzLtsBe9XAXfpyFawsUd9wEYTQy4tZpEj",
    "objectives": {
        "clockwise": {
            "objective": "QmRmj9VnRBbgmQwZMVU3oCinaYG8oh1UAvQJbtPUmEWSq1",
            "label": "clockwise",
        },
        "counterclockwise": {
            "objective": "Qmd1YREP5MMLzoxT2kmvEocPxFMGFiCrLK6zQRmp5ebBqU",
            "label": "counterclockwise",
        },
    },
}

IPFS_CONFIG = {
    "repo": "ipfs/robonomics",
    "relay": {
        "enabled": True,
        "hop": {
            "enabled": True,
        },
    },
    "EXPERIMENTAL": {
        "pubsub": True,
    },
    "config": {
        "Addresses": {
            "Swarm": [
                "/dns4/ws-star.discovery.libp2p.io/tcp/443/wss/p2p-websocket-star",
                "/dns4/1.wsstar.aira.life/tcp/443/wss/p2p-websocket-star/",
                "/dns4/2.wsstar.aira.life/tcp/443/wss/p2p-websocket-star/",
            ],
        },
        "Bootstrap": [
            "/dns4/ams-1.bootstrap.libp2p.io/tcp/443/wss/ipfs/QmSoLer265NRgSp2LA3dPaeykiS1J6DifTC88f5uVQKNAd",
            "/dns4/lon-1.bootstrap.libp2p.io/tcp/443/wss/ipfs/QmSoLMeWqB7YGVLJN3pNLQpmmEk35v6wYtsMGLzSr5QBU3",
            "/dns4/nyc-1.bootstrap.libp2p.io/tcp/443/wss/ipfs/QmSoLueR4xBeUbY9WZ9xGUUxunbKWcrNFTDAadQJmocnWm",
            "/dns4/nyc-2.bootstrap.libp2p.io/tcp/443/wss/ipfs/QmSoLV4Bbm51jM9C4gDYZQ9Cy3U6aXMJDAbzgu2fzaDs64",
            "/dns4/node0.preload.ipfs.io/tcp/443/wss/ipfs/QmZMxNdpMkewiVZLMRxaNxUeZpDUb34pWjZ1kZvsd16Zic",
            "/dns4/node1.preload.ipfs.io/tcp/443/wss/ipfs/Qmbut9Ywz9YEDrz8ySBSgWyJk41Uvm2QJPhwDJzJyGFsD6",
            "/dns4/1.pubsub.aira.life/tcp/443/wss/ipfs/QmdfQmbmXt6sqjZyowxPUsmvBsgSGQjm4VXrV7WGy62dv8",
            "/dns4/2.pubsub.aira.life/tcp/443/wss/ipfs/QmPTFt7GJ2MfDuVYwJJTULr6EnsQtGVp8ahYn9NSyoxmd9",
        ],
    },
}
