import dataclasses

import pytest

from partizee.constants import HARDENED_OFFSET, SECP256K1_ORDER
from partizee.crypto import hd
from partizee.crypto.hd import ExtendedKey, derive_child_key, generate_master_key, parse_path
from partizee.exceptions import (
    DerivedKeyIsInfinity,
    DerivedKeyIsZero,
    InvalidScalar,
    MissingPrivateKey,
    ValidationError,
)

# BIP32 test vector 1: (path, chain code, private key, public key)
VECTOR_1 = [
    (
        "m",
        "873dff81c02f525623fd1fe5167eac3a55a049de3d314bb42ee227ffed37d508",
        "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35",
        "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2",
    ),
    (
        "m/0'",
        "47fdacbd0f1097043b78c63c20c34ef4ed9a111d980047ad16282c7ae6236141",
        "edb2e14f9ee77d26dd93b4ecede8d16ed408ce149b6cd80b0715a2d911a0afea",
        "035a784662a4a20a65bf6aab9ae98a6c068a81c52e4b032c0fb5400c706cfccc56",
    ),
    (
        "m/0'/1",
        "2a7857631386ba23dacac34180dd1983734e444fdbf774041578e9b6adb37c19",
        "3c6cb8d0f6a264c91ea8b5030fadaa8e538b020f0a387421a12de9319dc93368",
        "03501e454bf00751f24b1b489aa925215d66af2234e3891c3b21a52bedb3cd711c",
    ),
    (
        "m/0'/1/2'",
        "04466b9cc8e161e966409ca52986c584f07e9dc81f735db683c3ff6ec7b1503f",
        "cbce0d719ecf7431d88e6a89fa1483e02e35092af60c042b1df2ff59fa424dca",
        "0357bfe1e341d01c69fe5654309956cbea516822fba8a601743a012a7896ee8dc2",
    ),
    (
        "m/0'/1/2'/2",
        "cfb71883f01676f587d023cc53a35bc7f88f724b1f8c2892ac1275ac822a3edd",
        "0f479245fb19a38a1954c5c7c0ebab2f9bdfd96a17563ef28a6a4b1a2a764ef4",
        "02e8445082a72f29b75ca48748a914df60622a609cacfce8ed0e35804560741d29",
    ),
]


@pytest.mark.parametrize("path,chain_code,private_key,public_key", VECTOR_1)
def test_vector_1(master, path, chain_code, private_key, public_key):
    key = master.derive_path(path)
    assert key.chain_code.hex() == chain_code
    assert key.private_key.hex() == private_key
    assert key.public_key.hex() == public_key
    assert key.depth == len(parse_path(path))


def test_master_key(master):
    assert master.is_private
    assert master.depth == 0
    assert master.child_number == 0
    assert len(master.private_key) == 32
    assert len(master.public_key) == 33
    assert len(master.chain_code) == 32


def test_child_derivation_is_deterministic(master):
    child = derive_child_key(master, 0)
    assert child.is_private
    assert child.depth == 1
    assert child.child_number == 0
    assert derive_child_key(master, 0) == child

    hardened = derive_child_key(master, HARDENED_OFFSET)
    assert hardened.is_private
    assert hardened.depth == 1
    assert hardened.is_hardened
    assert derive_child_key(master, HARDENED_OFFSET) == hardened
    assert hardened != child


def test_parent_is_not_mutated(master):
    before = (master.private_key, master.public_key, master.chain_code, master.depth)
    master.derive(7)
    assert (master.private_key, master.public_key, master.chain_code, master.depth) == before
    with pytest.raises(dataclasses.FrozenInstanceError):
        master.depth = 3


def test_public_only_derivation(master):
    parent = master.derive_path("m/0'")
    public = parent.public_only()
    assert not public.is_private

    child = public.derive(1)
    assert not child.is_private
    assert child.private_key is None
    assert child.public_key.hex() == VECTOR_1[2][3]
    assert child.chain_code.hex() == VECTOR_1[2][1]
    assert child == parent.derive(1).public_only()


def test_public_only_cannot_derive_hardened(master):
    public = master.public_only()
    with pytest.raises(MissingPrivateKey) as exc:
        public.derive(HARDENED_OFFSET)
    assert exc.value.index == HARDENED_OFFSET
    with pytest.raises(MissingPrivateKey):
        public.private_key_hex()


def test_seed_length():
    with pytest.raises(ValidationError):
        generate_master_key(b"\x00" * 15)
    with pytest.raises(ValidationError):
        generate_master_key(b"\x00" * 65)
    assert generate_master_key(b"\x00" * 64).depth == 0


def test_custom_hmac_key():
    seed = bytes(range(64))
    assert generate_master_key(seed) != generate_master_key(seed, b"Partisia seed")
    assert ExtendedKey.from_seed(seed) == generate_master_key(seed)


def test_invalid_master_scalar(monkeypatch):
    monkeypatch.setattr(hd, "_hmac_sha512", lambda key, data: b"\x00" * 64)
    with pytest.raises(InvalidScalar):
        generate_master_key(b"\x01" * 16)


def test_invalid_child_scalar(master, monkeypatch):
    il = SECP256K1_ORDER.to_bytes(32, "big")
    monkeypatch.setattr(hd, "_hmac_sha512", lambda key, data: il + b"\x01" * 32)
    with pytest.raises(InvalidScalar):
        master.derive(0)


def test_derived_key_is_zero(master, monkeypatch):
    k = int.from_bytes(master.private_key, "big")
    il = (SECP256K1_ORDER - k).to_bytes(32, "big")
    monkeypatch.setattr(hd, "_hmac_sha512", lambda key, data: il + b"\x01" * 32)
    with pytest.raises(DerivedKeyIsZero):
        master.derive(0)


def test_derived_key_is_infinity(master, monkeypatch):
    k = int.from_bytes(master.private_key, "big")
    il = (SECP256K1_ORDER - k).to_bytes(32, "big")
    public = master.public_only()
    monkeypatch.setattr(hd, "_hmac_sha512", lambda key, data: il + b"\x01" * 32)
    with pytest.raises(DerivedKeyIsInfinity):
        public.derive(0)


@pytest.mark.parametrize("index", [-1, 2**32])
def test_index_out_of_range(master, index):
    with pytest.raises(ValidationError):
        master.derive(index)


def test_parse_path():
    assert parse_path("m") == []
    assert parse_path("m/0'/1") == [HARDENED_OFFSET, 1]
    assert parse_path("M/44h/3757H/0'") == [
        HARDENED_OFFSET | 44, HARDENED_OFFSET | 3757, HARDENED_OFFSET
    ]
    assert parse_path("0/1") == [0, 1]
    for bad in ("", "m/", "m/x", "m/1''", "m/-1", f"m/{HARDENED_OFFSET}'", "m/²"):
        with pytest.raises(ValidationError):
            parse_path(bad)


def test_absolute_path_requires_master(master):
    child = master.derive(0)
    with pytest.raises(ValidationError):
        child.derive_path("m/1")
    assert child.derive_path("1") == master.derive_path("m/0/1")


def test_inconsistent_key_rejected(master):
    other = master.derive(0)
    with pytest.raises(ValidationError):
        ExtendedKey(master.private_key, other.public_key, master.chain_code)
    with pytest.raises(ValidationError):
        ExtendedKey(None, master.public_key, b"\x00" * 31)


def test_off_curve_public_key_rejected():
    # x >= p, so no point on the curve has this encoding
    with pytest.raises(ValidationError):
        ExtendedKey(None, b"\x02" + b"\xff" * 32, b"\x01" * 32)


def test_harden():
    assert hd.harden(0) == HARDENED_OFFSET
    assert hd.harden(44) == 44 | HARDENED_OFFSET
    assert hd.is_hardened(hd.harden(7))
    with pytest.raises(ValidationError):
        hd.harden(HARDENED_OFFSET)
    assert parse_path("m/44'/5h") == [hd.harden(44), hd.harden(5)]


def test_key_objects(master):
    assert master.to_private_key().hex() == master.private_key_hex()
    assert master.to_public_key().hex() == master.public_key_hex()
    assert master.to_private_key().public_key() == master.to_public_key()


def test_repr_hides_private_key(master):
    assert master.private_key.hex() not in repr(master)
    assert "private" in repr(master)
    assert "public" in repr(master.public_only())
