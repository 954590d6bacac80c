"""
Dot-product 테스트 공용 fixture 및 스텁 Prover.

스텁 Prover는 Hyrax Figure 6의 Prover 측을 그대로 따른다:

    δ = Com(d; r_δ),  β = Com(<a, d>; r_β)
    c = Fiat-Shamir(Cx, Cy, a, δ, β)
    z = c·x + d,  z_δ = c·r_x + r_δ,  z_β = c·r_τ + r_β

break_equation=13 이면 z_δ에 잘못된 블라인딩을 사용해 (13)만 깨지고,
break_equation=14 이면 τ가 <x, a>가 아닌 값을 커밋해 (14)만 깨진다.
"""

import random

import pytest

from hyrax.dotprod.commitments import (
    DotProductProofGens, commit_scalar, commit_vector
)
from hyrax.dotprod.field import FR, CURVE_ORDER
from hyrax.dotprod.proof import DotProductProof, dot_product
from hyrax.dotprod.transcript import Transcript


DIMENSION = 4
GENS_LABEL = b"test-dotprod-gens"

SECRET_X = [FR(3), FR(1), FR(4), FR(1)]
PUBLIC_A = [FR(2), FR(7), FR(1), FR(8)]   # <x, a> = 6 + 7 + 4 + 8 = 25


def random_fr(rng):
    return FR(rng.randrange(CURVE_ORDER))


def prove_dot_product(x, a, gens, seed=0, break_equation=None, transcript=None):
    """스텁 Prover. 검증에 필요한 모든 값을 dict로 반환한다."""
    rng = random.Random(seed)
    gens_1, gens_n = gens.gens_1, gens.gens_n

    r_x = random_fr(rng)
    r_tau = random_fr(rng)
    com_poly = commit_vector(x, r_x, gens_n)

    y = dot_product(x, a)
    if break_equation == 14:
        y = y + FR(1)
    tau = commit_scalar(y, r_tau, gens_1)

    d = [random_fr(rng) for _ in range(len(x))]
    r_delta = random_fr(rng)
    r_beta = random_fr(rng)
    delta = commit_vector(d, r_delta, gens_n)
    beta = commit_scalar(dot_product(a, d), r_beta, gens_1)

    if transcript is None:
        transcript = Transcript()
    transcript.append_protocol_name(b"dot product proof")
    transcript.append_point(b"Cx", com_poly)
    transcript.append_point(b"Cy", tau)
    transcript.append_scalar_sequence(b"a", a)
    transcript.append_point(b"delta", delta)
    transcript.append_point(b"beta", beta)
    c = transcript.challenge_scalar(b"c")

    z = [c * x_i + d_i for x_i, d_i in zip(x, d)]
    blind_x = r_x + FR(1) if break_equation == 13 else r_x
    z_delta = c * blind_x + r_delta
    z_beta = c * r_tau + r_beta

    return {
        "x": list(x),
        "a": list(a),
        "y": y,
        "tau": tau,
        "com_poly": com_poly,
        "c": c,
        "proof": DotProductProof(delta, beta, z, z_delta, z_beta),
    }


@pytest.fixture(scope="session")
def gens():
    """DIMENSION 차원 생성자 (gens_1, gens_n)."""
    return DotProductProofGens(DIMENSION, GENS_LABEL)


@pytest.fixture(scope="session")
def honest(gens):
    """정직한 Prover가 만든 증명과 공개 입력."""
    return prove_dot_product(SECRET_X, PUBLIC_A, gens, seed=42)


@pytest.fixture
def prove(gens):
    """스텁 Prover 함수 (gens 고정)."""
    def _prove(x=SECRET_X, a=PUBLIC_A, gens=gens, **kwargs):
        return prove_dot_product(x, a, gens, **kwargs)
    return _prove


@pytest.fixture(scope="session")
def gens_label():
    return GENS_LABEL
