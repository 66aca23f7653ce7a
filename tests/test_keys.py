import pytest

from partizee.crypto.keys import PrivateKey, PublicKey, address_from_public_key
from partizee.exceptions import ValidationError
from partizee.utils.validation import is_valid_address

SECRET = "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35"
PUBLIC = "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2"


def test_private_key_roundtrip():
    key = PrivateKey(SECRET)
    assert key.hex() == SECRET
    assert PrivateKey(bytes.fromhex(SECRET)) == key
    assert PrivateKey(key) == key
    assert key.public_key().hex() == PUBLIC


def test_private_key_rejects_invalid():
    with pytest.raises(ValidationError):
        PrivateKey("00" * 32)
    with pytest.raises(ValidationError):
        PrivateKey("abc")


def test_create_private_key():
    first = PrivateKey.create()
    assert len(first.secret) == 32
    assert PrivateKey.create() != first


def test_public_key_encodings():
    key = PrivateKey(SECRET)
    compressed = key.public_key(compressed=True)
    uncompressed = key.public_key(compressed=False)
    assert compressed.is_compressed
    assert not uncompressed.is_compressed
    assert len(uncompressed.point) == 65
    assert compressed == uncompressed
    assert uncompressed.compressed() == compressed.point
    assert compressed.uncompressed() == uncompressed.point


def test_public_key_not_on_curve():
    with pytest.raises(ValidationError):
        PublicKey("02" + "ff" * 32)


def test_address():
    key = PrivateKey(SECRET)
    address = key.address()
    assert len(address) == 42
    assert address.startswith("00")
    assert is_valid_address(address)
    assert address_from_public_key(key.public_key(compressed=False).point) == address
    assert address_from_public_key(bytes.fromhex(PUBLIC)) == address
    assert PrivateKey("01" * 32).address() != address


def test_repr_masks_secret():
    key = PrivateKey(SECRET)
    assert SECRET not in repr(key)
    assert repr(key) == "PrivateKey(e8f3...6b35)"
    assert key.address() in repr(key.public_key())
