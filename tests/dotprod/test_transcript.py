"""
Tests for the Fiat-Shamir Transcript.

Covers:
- determinism and order/label sensitivity
- message framing (length prefixes)
- scalar sequence sentinels
- challenge chaining
"""

import hashlib

import pytest

from hyrax.dotprod.field import FR, G1, CURVE_ORDER, ec_mul, compress_point
from hyrax.dotprod.transcript import Transcript


def _frame(label, message):
    return (len(label).to_bytes(4, "big") + label
            + len(message).to_bytes(4, "big") + message)


class TestTranscriptBasics:

    def test_initial_state_is_label(self):
        assert bytes(Transcript().state) == b"hyrax"
        assert bytes(Transcript(b"custom").state) == b"custom"

    def test_same_inputs_same_challenge(self):
        t1, t2 = Transcript(), Transcript()
        for t in (t1, t2):
            t.append_point(b"P", G1)
            t.append_scalar(b"s", FR(9))
        assert t1.challenge_scalar(b"c") == t2.challenge_scalar(b"c")

    def test_order_matters(self):
        t1, t2 = Transcript(), Transcript()
        t1.append_scalar(b"x", FR(1))
        t1.append_scalar(b"y", FR(2))
        t2.append_scalar(b"y", FR(2))
        t2.append_scalar(b"x", FR(1))
        assert t1.challenge_scalar(b"c") != t2.challenge_scalar(b"c")

    def test_label_matters(self):
        t1, t2 = Transcript(), Transcript()
        t1.append_point(b"Cx", G1)
        t2.append_point(b"Cy", G1)
        assert t1.challenge_scalar(b"c") != t2.challenge_scalar(b"c")

    def test_challenge_label_matters(self):
        assert Transcript().challenge_scalar(b"c") != Transcript().challenge_scalar(b"d")

    def test_challenge_in_field(self):
        c = Transcript().challenge_scalar(b"c")
        assert isinstance(c, FR)
        assert 0 <= int(c) < CURVE_ORDER

    def test_chaining(self):
        t = Transcript()
        c1 = t.challenge_scalar(b"c")
        c2 = t.challenge_scalar(b"c")
        assert c1 != c2

    def test_rejects_str_label(self):
        with pytest.raises(TypeError):
            Transcript().append_message("label", b"msg")

    def test_rejects_str_message(self):
        with pytest.raises(TypeError):
            Transcript().append_message(b"label", "msg")


class TestFraming:

    def test_append_message(self):
        t = Transcript(b"")
        t.append_message(b"ab", b"cde")
        assert bytes(t.state) == b"\x00\x00\x00\x02ab\x00\x00\x00\x03cde"

    def test_no_boundary_ambiguity(self):
        t1, t2 = Transcript(), Transcript()
        t1.append_message(b"ab", b"c")
        t2.append_message(b"a", b"bc")
        assert t1.state != t2.state

    def test_protocol_name(self):
        t = Transcript(b"")
        t.append_protocol_name(b"dot product proof")
        assert bytes(t.state) == _frame(b"protocol-name", b"dot product proof")

    def test_point(self):
        P = ec_mul(G1, 42)
        t = Transcript(b"")
        t.append_point(b"delta", P)
        assert bytes(t.state) == _frame(b"delta", compress_point(P))

    def test_identity_point(self):
        t = Transcript(b"")
        t.append_point(b"beta", None)
        assert bytes(t.state) == _frame(b"beta", b"\x00" * 33)

    def test_scalar_sequence_sentinels(self):
        t = Transcript(b"")
        t.append_scalar_sequence(b"a", [FR(1), FR(2)])
        expected = (
            _frame(b"a", b"begin_append_vector")
            + _frame(b"a", (1).to_bytes(32, "big"))
            + _frame(b"a", (2).to_bytes(32, "big"))
            + _frame(b"a", b"end_append_vector")
        )
        assert bytes(t.state) == expected

    def test_empty_sequence_still_delimited(self):
        t = Transcript(b"")
        t.append_scalar_sequence(b"a", [])
        assert bytes(t.state) == (
            _frame(b"a", b"begin_append_vector")
            + _frame(b"a", b"end_append_vector")
        )

    def test_challenge_bytes(self):
        t = Transcript(b"seed")
        c = t.challenge_scalar(b"c")
        state = b"seed" + _frame(b"c", b"")
        h = hashlib.sha512(state).digest()
        assert c == FR(int.from_bytes(h, "big") % CURVE_ORDER)
        assert bytes(t.state) == state + h
