"""
Fiat-Shamir Transcript
=======================

대화식 dot-product 시그마 프로토콜을 비대화식으로 변환하기 위한
Fiat-Shamir 트랜스크립트.

**Fiat-Shamir 변환이란?**
  원래 프로토콜은 대화식이다:
  - Prover가 커밋먼트 δ, β를 보내면
  - Verifier가 랜덤 챌린지 c를 보내고
  - Prover가 응답 z, z_δ, z_β를 보낸다

  Fiat-Shamir 변환은 챌린지를 지금까지의 모든 메시지의 해시로 대체한다.
  Prover와 Verifier가 같은 순서, 같은 레이블, 같은 바이트로 흡수해야
  같은 챌린지가 나온다.

**메시지 프레이밍**:
  모든 메시지는 다음 형태로 상태에 추가된다:

      len(label) (4바이트 BE) ‖ label ‖ len(msg) (4바이트 BE) ‖ msg

  길이 접두사 덕분에 서로 다른 (label, msg) 열이 같은 바이트열이 되지 않는다.

**챌린지 도출**:
  h = SHA-512(state), c = int(h) mod r.
  64바이트 해시를 축소하므로 모듈러 편향이 무시할 만하다.
  h는 다시 상태에 추가되어 이어지는 챌린지가 서로 달라진다.

사용 예시:
    >>> t = Transcript()
    >>> t.append_protocol_name(b"dot product proof")
    >>> t.append_point(b"Cx", commitment)
    >>> c = t.challenge_scalar(b"c")
"""

import hashlib

from hyrax.dotprod.field import (
    FR, CURVE_ORDER, compress_point, scalar_to_bytes
)


DEFAULT_LABEL = b"hyrax"

PROTOCOL_NAME_LABEL = b"protocol-name"
BEGIN_VECTOR = b"begin_append_vector"
END_VECTOR = b"end_append_vector"


def _frame(label, message):
    return (
        len(label).to_bytes(4, "big") + label
        + len(message).to_bytes(4, "big") + message
    )


class Transcript:
    """SHA-512 기반 Fiat-Shamir 트랜스크립트.

    하나의 검증 호출이 독점적으로 소유한다. 서로 독립적인 검증 사이에서
    재사용하거나 공유하면 Fiat-Shamir 바인딩이 깨진다.

    속성:
        state: 현재까지 누적된 해시 입력 바이트열
    """

    def __init__(self, label=DEFAULT_LABEL):
        """트랜스크립트를 초기화한다.

        Args:
            label: 트랜스크립트 도메인 분리용 레이블 (기본값: b"hyrax")
        """
        if not isinstance(label, (bytes, bytearray)):
            raise TypeError("label은 bytes여야 합니다")
        self.state = bytearray()
        self.state.extend(label)

    def append_message(self, label, message):
        """레이블이 붙은 원시 바이트열을 흡수한다."""
        if not isinstance(label, (bytes, bytearray)):
            raise TypeError("label은 bytes여야 합니다")
        if not isinstance(message, (bytes, bytearray)):
            raise TypeError("message는 bytes여야 합니다")
        self.state.extend(_frame(bytes(label), bytes(message)))

    def append_protocol_name(self, name):
        """프로토콜 도메인 분리자를 흡수한다 (프로토콜 시작 시 한 번)."""
        self.append_message(PROTOCOL_NAME_LABEL, name)

    def append_point(self, label, point):
        """G1 점의 33바이트 압축 인코딩을 흡수한다.

        Args:
            label: 바이트열 레이블 (예: b"Cx")
            point: G1 점 또는 None (항등원)
        """
        self.append_message(label, compress_point(point))

    def append_scalar(self, label, scalar):
        """FR 스칼라의 32바이트 빅엔디안 인코딩을 흡수한다."""
        self.append_message(label, scalar_to_bytes(scalar))

    def append_scalar_sequence(self, label, scalars):
        """스칼라 벡터를 시작/끝 센티널 사이에 원소별로 흡수한다.

        흡수 순서:
            (label, b"begin_append_vector")
            (label, s₀), (label, s₁), ...
            (label, b"end_append_vector")
        """
        self.append_message(label, BEGIN_VECTOR)
        for scalar in scalars:
            self.append_scalar(label, scalar)
        self.append_message(label, END_VECTOR)

    def challenge_scalar(self, label):
        """지금까지 흡수된 모든 데이터로부터 챌린지 스칼라를 도출한다.

        Args:
            label: 바이트열 레이블 (예: b"c")

        Returns:
            FR: 챌린지 스칼라
        """
        self.append_message(label, b"")
        h = hashlib.sha512(bytes(self.state)).digest()
        challenge = FR(int.from_bytes(h, "big") % CURVE_ORDER)

        # 체이닝: 다음 챌린지에 영향
        self.state.extend(h)

        return challenge
