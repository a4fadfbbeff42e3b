import pytest

from petlib.bn import Bn

from zkrsa.exceptions import EncodingError
from zkrsa.utils.octets import (
    i2osp,
    os2ip,
    octet_length,
    combine,
    sha256,
    mgf1_sha256,
    truncate_to_k_bits,
)


def test_i2osp_pads_on_the_left():
    assert i2osp(0x0102, 4) == b"\x00\x00\x01\x02"


def test_i2osp_accepts_bn():
    assert i2osp(Bn(255), 1) == b"\xff"


def test_i2osp_zero():
    assert i2osp(0, 3) == b"\x00\x00\x00"


def test_i2osp_too_large():
    with pytest.raises(EncodingError):
        i2osp(256, 1)


def test_i2osp_negative():
    with pytest.raises(EncodingError):
        i2osp(-1, 4)


@pytest.mark.parametrize("length", [1, 16, 64, 256])
def test_i2osp_os2ip_recover_value(length):
    value = Bn(2).pow(8 * length).random()
    encoded = i2osp(value, length)
    assert len(encoded) == length
    assert os2ip(encoded) == value


def test_os2ip_ignores_leading_zeros():
    assert os2ip(b"\x00\x00\x07") == 7


@pytest.mark.parametrize(
    "value,expected", [(0, 0), (1, 1), (255, 1), (256, 2), (2 ** 64, 9)]
)
def test_octet_length(value, expected):
    assert octet_length(value) == expected


def test_combine_keeps_order():
    assert combine(b"a", b"b") != combine(b"b", b"a")
    assert combine() == b""


def test_mgf1_length():
    for bits in [1, 8, 255, 256, 257, 2048]:
        assert len(mgf1_sha256(b"seed", bits)) == (bits + 7) // 8


def test_mgf1_blocks():
    out = mgf1_sha256(b"seed", 512)
    assert out[:32] == sha256(b"seed\x00\x00\x00\x00")
    assert out[32:] == sha256(b"seed\x00\x00\x00\x01")


def test_mgf1_is_deterministic():
    assert mgf1_sha256(b"seed", 1000) == mgf1_sha256(b"seed", 1000)
    assert mgf1_sha256(b"seed", 1000) != mgf1_sha256(b"seeD", 1000)


def test_mgf1_prefix_consistent():
    assert mgf1_sha256(b"seed", 1024)[:64] == mgf1_sha256(b"seed", 512)


def test_truncate_keeps_low_order_bits():
    data = sha256(b"data")
    for k in [8, 13, 64, 128, 256]:
        truncated = truncate_to_k_bits(data, k)
        assert int(os2ip(truncated)) == int(os2ip(data)) % 2 ** k
        assert len(truncated) == (k + 7) // 8


def test_truncate_short_input():
    assert truncate_to_k_bits(b"\x05", 16) == b"\x00\x05"
