import pytest

from beacon.fingerprint.hasher import C, MASK64, Hasher, hash_bytes, to_signed


def test_same_input_produces_same_hash():
    assert hash_bytes(b"same input") == hash_bytes(b"same input")


def test_similar_input_produces_different_hash():
    a = hash_bytes(b"same input")
    assert a != hash_bytes(b"some input")

    c = Hasher()
    c.write_bytes(b"same input")
    c.write(0)
    assert a != c.finalize()


def test_order_matters():
    a = Hasher()
    a.write_bytes(b"alice")
    a.write_bytes(b"bob")

    b = Hasher()
    b.write_bytes(b"bob")
    b.write_bytes(b"alice")

    assert a.finalize() != b.finalize()


def test_known_values():
    assert hash_bytes(b"") == 0
    assert hash_bytes(b"\x01") == C

    h = Hasher()
    h.write(1)
    assert h.finalize() == C


def test_empty_bytes_still_write_one_chunk():
    h = Hasher()
    h.write(7)
    h.write_bytes(b"")

    expected = Hasher()
    expected.write(7)
    expected.write(0)
    assert h.finalize() == expected.finalize()


def test_exact_chunk_is_single_write():
    h = Hasher()
    h.write(int.from_bytes(b"abcdefgh", "little"))
    assert h.finalize() == hash_bytes(b"abcdefgh")


def test_tail_is_zero_padded():
    h = Hasher()
    h.write(int.from_bytes(b"abcdefgh", "little"))
    h.write(ord("i"))
    assert h.finalize() == hash_bytes(b"abcdefghi")


def test_negative_chunk_is_twos_complement():
    a = Hasher()
    a.write(-1)
    b = Hasher()
    b.write(MASK64)
    assert a.finalize() == b.finalize()


def test_write_str_is_utf8():
    a = Hasher()
    a.write_str("Zürich")
    assert a.finalize() == hash_bytes("Zürich".encode("utf-8"))


def test_finalized_hasher_cannot_be_reused():
    h = Hasher()
    h.write(1)
    h.finalize()
    with pytest.raises(RuntimeError):
        h.write(2)
    with pytest.raises(RuntimeError):
        h.write_bytes(b"x")
    with pytest.raises(RuntimeError):
        h.finalize()


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (5, 5),
        ((1 << 63) - 1, (1 << 63) - 1),
        (1 << 63, -(1 << 63)),
        (MASK64, -1),
    ],
)
def test_to_signed(value, expected):
    assert to_signed(value) == expected
