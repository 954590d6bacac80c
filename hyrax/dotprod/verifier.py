"""
Dot-product 증명 Verifier
==========================

Prover가 비밀 벡터 x를 알고 있고 (com_poly = Com(x; r_x)),
공개 벡터 a와의 내적이 τ에 커밋된 값 y와 같음 (y = <x, a>)을 검증한다.

참고: Hyrax (https://eprint.iacr.org/2017/1132.pdf) P.18, Figure 6, step 4

**검증 과정**:
  0. 차원 확인: len(a) == len(z) == gens_n.n, gens_1.n == 1
  1. 프로토콜 이름 흡수          b"dot product proof"
  2. com_poly 흡수               b"Cx"
  3. τ 흡수                      b"Cy"
  4. 공개 벡터 a 흡수            b"a" (begin/end 센티널)
  5. δ 흡수                      b"delta"
  6. β 흡수                      b"beta"
  7. 챌린지 c 도출               b"c"
  8. 방정식 (13): c·Cx + δ == Com(z; z_δ)
  9. 방정식 (14): c·τ + β == Com(<z, a>; z_β)

**왜 두 방정식인가?**
  (13)은 z가 com_poly를 여는 x와 일관됨을 보이고,
  (14)는 같은 z의 a와의 내적이 τ와 일관됨을 보인다.
  둘 중 하나라도 성립하지 않으면 거부한다.

사용 예시:
    >>> from hyrax.dotprod.verifier import verify
    >>> result = verify(tau, a, proof, com_poly, gens.gens_1, gens.gens_n)
    >>> bool(result)
"""

import logging

from hyrax.dotprod.commitments import commit_scalar, commit_vector
from hyrax.dotprod.errors import MalformedInputError, VerificationFailedError
from hyrax.dotprod.field import ec_add, ec_mul
from hyrax.dotprod.proof import dot_product
from hyrax.dotprod.transcript import Transcript


logger = logging.getLogger(__name__)

PROTOCOL_NAME = b"dot product proof"
LABEL_COM_POLY = b"Cx"
LABEL_TAU = b"Cy"
LABEL_A = b"a"
LABEL_DELTA = b"delta"
LABEL_BETA = b"beta"
LABEL_CHALLENGE = b"c"


class VerificationResult:
    """검증 결과.

    속성:
        ok: 두 방정식이 모두 성립하면 True
        challenge: 도출된 챌린지 c (트랜스크립트 작업 전에 거부되면 None)
        error: None, MalformedInputError 또는 VerificationFailedError
    """

    def __init__(self, ok, challenge=None, error=None):
        self.ok = ok
        self.challenge = challenge
        self.error = error

    @property
    def equation(self):
        """실패한 방정식 번호 (13, 14) 또는 None."""
        return getattr(self.error, "equation", None)

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return "VerificationResult(ok=True)"
        return f"VerificationResult(ok=False, error={self.error!r})"

    def raise_for_error(self):
        """실패한 결과이면 담고 있는 오류를 발생시킨다."""
        if self.error is not None:
            raise self.error


def check_dimensions(a, proof, gens_1, gens_n):
    """그룹 연산 전에 모든 벡터 길이를 확인한다.

    Raises:
        MalformedInputError: 차원 불일치
    """
    if gens_1.n != 1:
        raise MalformedInputError(
            f"스칼라 생성자 크기는 1이어야 합니다: {gens_1.n}"
        )
    if not len(a) == len(proof.z) == gens_n.n:
        raise MalformedInputError(
            f"차원 불일치: len(a)={len(a)}, len(z)={len(proof.z)}, "
            f"gens_n={gens_n.n}"
        )


def append_statement(transcript, tau, a, proof, com_poly):
    """고정된 순서로 공개 입력과 증명 커밋먼트를 트랜스크립트에 흡수한다."""
    transcript.append_protocol_name(PROTOCOL_NAME)
    transcript.append_point(LABEL_COM_POLY, com_poly)
    transcript.append_point(LABEL_TAU, tau)
    transcript.append_scalar_sequence(LABEL_A, a)
    transcript.append_point(LABEL_DELTA, proof.delta)
    transcript.append_point(LABEL_BETA, proof.beta)


def verify(tau, a, proof, com_poly, gens_1, gens_n, transcript=None):
    """dot-product 증명을 검증한다.

    Args:
        tau: G1 점, 내적 값 y에 대한 커밋먼트
        a: 공개 스칼라 벡터 (길이 D)
        proof: DotProductProof
        com_poly: G1 점, 비밀 벡터 x에 대한 커밋먼트
        gens_1: 크기 1의 MultiCommitGens
        gens_n: 크기 D의 MultiCommitGens
        transcript: 상위 프로토콜의 진행 중인 트랜스크립트.
                    None이면 새로 만든다.

    Returns:
        VerificationResult: 실패 시 어느 방정식이 실패했는지 담는다
    """
    try:
        check_dimensions(a, proof, gens_1, gens_n)
    except MalformedInputError as exc:
        logger.info("dot product proof rejected: %s", exc)
        return VerificationResult(False, error=exc)

    if transcript is None:
        transcript = Transcript()

    append_statement(transcript, tau, a, proof, com_poly)
    c = transcript.challenge_scalar(LABEL_CHALLENGE)
    logger.debug("dot product challenge c=%d", int(c))

    # (13)
    lhs = ec_add(ec_mul(com_poly, c), proof.delta)
    rhs = commit_vector(proof.z, proof.z_delta, gens_n)
    if lhs != rhs:
        logger.info("dot product verification failed (13)")
        return VerificationResult(False, c, VerificationFailedError(13))

    # (14)
    lhs = ec_add(ec_mul(tau, c), proof.beta)
    rhs = commit_scalar(dot_product(proof.z, a), proof.z_beta, gens_1)
    if lhs != rhs:
        logger.info("dot product verification failed (14)")
        return VerificationResult(False, c, VerificationFailedError(14))

    return VerificationResult(True, c)
