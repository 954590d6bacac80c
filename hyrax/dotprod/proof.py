"""
Dot-product 증명 데이터
========================

Prover가 보내는 증명 요소 묶음과 내적(dot product) 유틸리티.

**증명 구조** (와이어 순서):
    (δ, β, z, z_δ, z_β)

    δ, β: G1 점 — 중간 랜덤 값에 대한 커밋먼트
    z:    FR 원소 D개 — 마스킹된 응답 벡터
    z_δ, z_β: FR — 마스킹된 블라인딩 응답

  D(차원)는 증명 인스턴스마다 고정되며 공개 벡터 a의 길이,
  벡터 생성자 개수와 같아야 한다.
"""

from hyrax.dotprod.errors import MalformedInputError
from hyrax.dotprod.field import FR


def dot_product(x, a):
    """두 스칼라 벡터의 내적 Σᵢ xᵢ·aᵢ 를 계산한다.

    짧은 쪽에 맞춰 잘라내지 않는다. 길이가 다르면 오류이다.

    Args:
        x, a: FR 원소(또는 정수) 리스트

    Returns:
        FR: 내적 값 (빈 벡터이면 FR(0))

    Raises:
        MalformedInputError: len(x) != len(a)

    예시:
        >>> dot_product([FR(1), FR(2)], [FR(3), FR(4)])  # FR(11)
    """
    if len(x) != len(a):
        raise MalformedInputError(
            f"내적 벡터 길이가 다릅니다: {len(x)} != {len(a)}"
        )
    result = FR(0)
    for x_i, a_i in zip(x, a):
        result = result + FR(x_i) * FR(a_i)
    return result


class DotProductProof:
    """dot-product 증명 데이터 컨테이너.

    속성:
        delta: G1 점 (δ = Com(d; r_δ))
        beta: G1 점 (β = Com(<a, d>; r_β))
        z: FR 튜플 (z = c·x + d)
        z_delta: FR (z_δ = c·r_x + r_δ)
        z_beta: FR (z_β = c·r_τ + r_β)
    """

    def __init__(self, delta, beta, z, z_delta, z_beta):
        self.delta = delta
        self.beta = beta
        self.z = tuple(FR(z_i) for z_i in z)
        self.z_delta = FR(z_delta)
        self.z_beta = FR(z_beta)

    @property
    def dimension(self):
        return len(self.z)

    def to_tuple(self):
        """와이어 순서 튜플 (delta, beta, z, z_delta, z_beta)."""
        return (self.delta, self.beta, self.z, self.z_delta, self.z_beta)

    @classmethod
    def from_tuple(cls, data):
        delta, beta, z, z_delta, z_beta = data
        return cls(delta, beta, z, z_delta, z_beta)

    def __eq__(self, other):
        if not isinstance(other, DotProductProof):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __repr__(self):
        return f"DotProductProof(dimension={self.dimension})"
