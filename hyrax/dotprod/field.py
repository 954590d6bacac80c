"""
Dot-product 증명 기반 모듈: 스칼라 필드 및 타원곡선 연산
=========================================================

dot-product 논증(argument) 전체에서 사용되는 기본 대수적 도구를 정의한다.

**스칼라 필드 FR**:
  bn128 타원곡선의 스칼라 필드. 응답 벡터 z, 공개 벡터 a, 챌린지 c 등
  모든 스칼라 값이 이 필드의 원소이다.

**G1 그룹**:
  Pedersen 커밋먼트가 사는 그룹. 점은 (x, y) FQ 튜플이고
  항등원(무한원점)은 None으로 표현한다.

**바이트 인코딩**:
  Fiat-Shamir 트랜스크립트에 흡수(absorb)되는 정규(canonical) 인코딩.
  - 스칼라: 32바이트 빅엔디안
  - 점: 33바이트 압축 형식 (0x02/0x03 접두사 + x좌표, 항등원은 0x00 × 33)

사용 예시:
    >>> from hyrax.dotprod.field import FR, G1, ec_mul, compress_point
    >>> P = ec_mul(G1, FR(5))
    >>> len(compress_point(P))  # 33
"""

from py_ecc import bn128
from py_ecc.fields import bn128_FQ as FQ

from hyrax.dotprod.errors import MalformedInputError


# ─────────────────────────────────────────────────────────────────────
# 스칼라 필드 FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 등의 필드 연산을 제공한다.

    예시:
        >>> FR(3) * FR(7)  # FR(21)
    """
    field_modulus = bn128.curve_order


# 스칼라 필드 크기 (= G1의 위수)
CURVE_ORDER = bn128.curve_order

# 좌표 필드 크기 p (p ≡ 3 mod 4)
FIELD_MODULUS = FQ.field_modulus

SCALAR_BYTES = 32
POINT_BYTES = 33


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

G1 = bn128.G1

# 항등원 (point at infinity)
Z1 = None


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 위의 점 (None이면 항등원)
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point
    """
    if point is None:
        return None
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원: -point."""
    if point is None:
        return None
    return bn128.neg(point)


def is_on_curve(point):
    """점이 항등원이거나 y² = x³ + 3 위에 있는지 확인한다."""
    if point is None:
        return True
    return bn128.is_on_curve(point, FQ(3))


# ─────────────────────────────────────────────────────────────────────
# 스칼라 인코딩
# ─────────────────────────────────────────────────────────────────────

def scalar_to_bytes(scalar):
    """FR 원소를 32바이트 빅엔디안으로 직렬화한다.

    Args:
        scalar: FR 원소 또는 정수

    Returns:
        bytes: 정규 인코딩 (항상 32바이트)
    """
    val = int(scalar) % CURVE_ORDER
    return val.to_bytes(SCALAR_BYTES, "big")


def scalar_from_bytes(data):
    """32바이트 빅엔디안 인코딩을 FR 원소로 복원한다.

    Raises:
        MalformedInputError: 길이가 32가 아니거나 값이 위수 이상일 때
            (비정규 인코딩은 거부한다)
    """
    if len(data) != SCALAR_BYTES:
        raise MalformedInputError(
            f"스칼라 인코딩은 {SCALAR_BYTES}바이트여야 합니다: {len(data)}"
        )
    val = int.from_bytes(data, "big")
    if val >= CURVE_ORDER:
        raise MalformedInputError("비정규(non-canonical) 스칼라 인코딩입니다")
    return FR(val)


# ─────────────────────────────────────────────────────────────────────
# 점 압축 (SEC1 스타일)
# ─────────────────────────────────────────────────────────────────────

def _sqrt_fq(value):
    """좌표 필드 위의 제곱근. p ≡ 3 (mod 4)이므로 r = v^((p+1)/4).

    제곱근이 없으면 None을 반환한다.
    """
    root = pow(value, (FIELD_MODULUS + 1) // 4, FIELD_MODULUS)
    if root * root % FIELD_MODULUS != value % FIELD_MODULUS:
        return None
    return root


def compress_point(point):
    """G1 점을 33바이트 압축 형식으로 직렬화한다.

    형식:
        항등원: 0x00 × 33
        그 외:  (0x02 | y의 홀짝) ‖ x (32바이트 빅엔디안)

    Args:
        point: G1 점 또는 None

    Returns:
        bytes: 33바이트 압축 인코딩
    """
    if point is None:
        return b"\x00" * POINT_BYTES
    x, y = point
    prefix = 0x03 if int(y) & 1 else 0x02
    return bytes([prefix]) + int(x).to_bytes(32, "big")


def decompress_point(data):
    """33바이트 압축 인코딩을 G1 점으로 복원한다.

    Raises:
        MalformedInputError: 길이/접두사가 잘못되었거나 x가 곡선 위의
            점에 대응하지 않을 때
    """
    if len(data) != POINT_BYTES:
        raise MalformedInputError(
            f"점 인코딩은 {POINT_BYTES}바이트여야 합니다: {len(data)}"
        )
    prefix = data[0]
    if prefix == 0x00:
        if any(data[1:]):
            raise MalformedInputError("잘못된 항등원 인코딩입니다")
        return None
    if prefix not in (0x02, 0x03):
        raise MalformedInputError(f"알 수 없는 점 접두사입니다: {prefix:#04x}")

    x = int.from_bytes(data[1:], "big")
    if x >= FIELD_MODULUS:
        raise MalformedInputError("x좌표가 필드 범위를 벗어났습니다")

    y = _sqrt_fq((x * x * x + 3) % FIELD_MODULUS)
    if y is None:
        raise MalformedInputError("x좌표에 대응하는 곡선 위의 점이 없습니다")
    if (y & 1) != (prefix & 1):
        y = FIELD_MODULUS - y
    return (FQ(x), FQ(y))
