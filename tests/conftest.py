import pytest

from partizee.crypto.hd import generate_master_key
from partizee.crypto.wordlist import Wordlist


@pytest.fixture(scope="session")
def wordlist():
    return Wordlist.english()


@pytest.fixture
def master():
    return generate_master_key(bytes.fromhex("000102030405060708090a0b0c0d0e0f"))
