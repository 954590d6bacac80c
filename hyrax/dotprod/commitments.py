"""
Pedersen 커밋먼트 스킴
=======================

벡터(또는 단일 스칼라)에 대한 Pedersen 커밋먼트를 계산한다.

**Pedersen 커밋먼트란?**
  공개 생성자 G₀, ..., G_{n-1}과 블라인딩 생성자 h에 대해

      Com(v; r) = Σᵢ vᵢ·Gᵢ + r·h

  - 바인딩(binding): 생성자 간의 이산로그 관계를 모르면 다른 값으로 열 수 없음
  - 하이딩(hiding): 랜덤 r이 커밋된 값을 완전히 가림

**생성자 생성**:
  생성자 사이의 이산로그 관계를 아무도 몰라야 하므로, SRS처럼 비밀 값에서
  유도하지 않고 레이블을 해싱하여 곡선 위의 점을 직접 찾는다
  (try-and-increment).

**dot-product 증명의 생성자 배치**:
  MultiCommitGens.new(n + 1, label)을 만든 뒤 n에서 나누어
  gens_n (벡터용, 크기 n)과 gens_1 (스칼라용, 크기 1)을 얻는다.
  두 집합은 같은 블라인딩 생성자 h를 공유한다.

사용 예시:
    >>> gens = DotProductProofGens(4, b"example")
    >>> C = commit_vector([FR(1), FR(2), FR(3), FR(4)], FR(7), gens.gens_n)
"""

import hashlib

from hyrax.dotprod.errors import MalformedInputError
from hyrax.dotprod.field import (
    FR, FIELD_MODULUS, ec_add, ec_mul, decompress_point
)


DEFAULT_GENS_LABEL = b"hyrax-dotprod-gens"


class MultiCommitGens:
    """Pedersen 커밋먼트용 공개 생성자 집합.

    속성:
        n: 벡터 생성자 개수
        G: 벡터 생성자 리스트 [G₀, ..., G_{n-1}]
        h: 블라인딩 생성자
    """

    def __init__(self, n, G, h):
        if len(G) != n:
            raise MalformedInputError(
                f"생성자 개수 {len(G)}가 n={n}과 일치하지 않습니다"
            )
        self.n = n
        self.G = list(G)
        self.h = h

    def __eq__(self, other):
        if not isinstance(other, MultiCommitGens):
            return NotImplemented
        return self.n == other.n and self.G == other.G and self.h == other.h

    def __repr__(self):
        return f"MultiCommitGens(n={self.n})"

    @classmethod
    def new(cls, n, label=DEFAULT_GENS_LABEL):
        """레이블로부터 n + 1개의 점을 결정론적으로 생성한다.

        카운터 i = 0, 1, ... 에 대해 SHA-256(label ‖ b"/" ‖ i)를 x 후보로
        사용하고, 곡선 위의 점이 되는 첫 x를 채택한다 (짝수 y).
        앞의 n개가 G, 마지막 하나가 h가 된다.

        Args:
            n: 벡터 생성자 개수
            label: 도메인 분리용 바이트열 레이블

        Returns:
            MultiCommitGens
        """
        if n < 0:
            raise MalformedInputError(f"n은 0 이상이어야 합니다: {n}")

        points = []
        counter = 0
        while len(points) < n + 1:
            digest = hashlib.sha256(
                label + b"/" + counter.to_bytes(4, "big")
            ).digest()
            counter += 1
            x = int.from_bytes(digest, "big") % FIELD_MODULUS
            try:
                point = decompress_point(b"\x02" + x.to_bytes(32, "big"))
            except MalformedInputError:
                continue
            points.append(point)

        return cls(n, points[:n], points[n])

    def split_at(self, mid):
        """벡터 생성자를 mid에서 나눈다. 두 집합 모두 h를 유지한다.

        Returns:
            (MultiCommitGens, MultiCommitGens): (G[:mid], G[mid:])
        """
        if not 0 <= mid <= self.n:
            raise MalformedInputError(
                f"분할 위치 {mid}가 범위 [0, {self.n}]를 벗어났습니다"
            )
        return (
            MultiCommitGens(mid, self.G[:mid], self.h),
            MultiCommitGens(self.n - mid, self.G[mid:], self.h),
        )


class DotProductProofGens:
    """dot-product 증명에 필요한 두 생성자 집합.

    속성:
        n: 벡터 차원 D
        gens_n: 크기 n의 벡터 커밋먼트 생성자
        gens_1: 크기 1의 스칼라 커밋먼트 생성자
    """

    def __init__(self, n, label=DEFAULT_GENS_LABEL):
        gens = MultiCommitGens.new(n + 1, label)
        self.n = n
        self.gens_n, self.gens_1 = gens.split_at(n)


# ─────────────────────────────────────────────────────────────────────
# 커밋먼트
# ─────────────────────────────────────────────────────────────────────

def commit_vector(values, blinding, gens):
    """벡터 커밋먼트: Σᵢ valuesᵢ·Gᵢ + blinding·h.

    Args:
        values: FR 원소 리스트 (길이 gens.n)
        blinding: 블라인딩 스칼라
        gens: MultiCommitGens

    Returns:
        G1 점

    Raises:
        MalformedInputError: len(values) != gens.n
    """
    if len(values) != gens.n:
        raise MalformedInputError(
            f"벡터 길이 {len(values)}가 생성자 개수 {gens.n}와 일치하지 않습니다"
        )

    result = ec_mul(gens.h, blinding)
    for value, generator in zip(values, gens.G):
        if not isinstance(value, FR):
            value = FR(value)
        if value == FR(0):
            continue
        result = ec_add(result, ec_mul(generator, value))
    return result


def commit_scalar(value, blinding, gens):
    """스칼라 커밋먼트: value·G₀ + blinding·h (gens.n == 1)."""
    if gens.n != 1:
        raise MalformedInputError(
            f"스칼라 커밋먼트는 크기 1의 생성자가 필요합니다: n={gens.n}"
        )
    return commit_vector([value], blinding, gens)
