"""
Dot-product 증명 오류 타입
===========================

검증 과정에서 발생할 수 있는 두 가지 종료(terminal) 오류를 정의한다.

  - MalformedInputError: 차원 불일치, 잘못된 인코딩 등 입력 형식 오류.
    그룹 연산이나 트랜스크립트 작업 전에 감지된다.
  - VerificationFailedError: 검증 방정식 (13) 또는 (14)가 성립하지 않음.

두 오류 모두 결정론적이므로 재시도(retry)는 의미가 없다.
"""


class DotProductProofError(Exception):
    """dot-product 증명 관련 오류의 기반 클래스."""


class MalformedInputError(DotProductProofError, ValueError):
    """입력의 형식(차원, 인코딩)이 올바르지 않다."""


class VerificationFailedError(DotProductProofError):
    """검증 방정식이 성립하지 않는다.

    속성:
        equation: 실패한 방정식 번호 (13 또는 14)
    """

    def __init__(self, equation):
        self.equation = equation
        super().__init__(f"dot product verification failed ({equation})")
