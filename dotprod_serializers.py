"""
Dot-product 데이터 직렬화/역직렬화 헬퍼
==========================================

JSON 요청/응답과 TinyDB에 저장 가능한 형태로 dot-product 객체를 변환한다.
FR, G1, FR 리스트, DotProductProof, VerificationResult.

역직렬화 실패는 모두 MalformedInputError로 보고한다.
"""

import re

from hyrax.dotprod.errors import MalformedInputError
from hyrax.dotprod.field import (
    FR, CURVE_ORDER, compress_point, decompress_point
)
from hyrax.dotprod.proof import DotProductProof

_DECIMAL = re.compile(r"[0-9]+")


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) → FR

    10진 숫자 문자열 또는 int만 받는다. float, bool, 부호, 공백, 밑줄이
    섞인 값과 범위 밖의 값은 거부한다.
    """
    if isinstance(s, str) and _DECIMAL.fullmatch(s):
        val = int(s)
    elif isinstance(s, int) and not isinstance(s, bool):
        val = s
    else:
        raise MalformedInputError(f"스칼라가 아닙니다: {s!r}")
    if not 0 <= val < CURVE_ORDER:
        raise MalformedInputError(f"스칼라가 필드 범위를 벗어났습니다: {s!r}")
    return FR(val)


# ─── FR list ───

def serialize_fr_list(lst):
    """list[FR] → list[str]"""
    return [serialize_fr(v) for v in lst]


def deserialize_fr_list(data):
    """list[str] → list[FR]"""
    if not isinstance(data, list):
        raise MalformedInputError("스칼라 리스트가 필요합니다")
    return [deserialize_fr(s) for s in data]


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → hex (33바이트 압축)"""
    return compress_point(point).hex()


def deserialize_g1(data):
    """hex → G1 point"""
    try:
        raw = bytes.fromhex(data)
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"점 인코딩이 hex가 아닙니다: {data!r}") from exc
    return decompress_point(raw)


# ─── Proof ───

def serialize_proof(proof):
    """DotProductProof → dict (와이어 순서)"""
    return {
        "delta": serialize_g1(proof.delta),
        "beta": serialize_g1(proof.beta),
        "z": serialize_fr_list(proof.z),
        "z_delta": serialize_fr(proof.z_delta),
        "z_beta": serialize_fr(proof.z_beta),
    }


def deserialize_proof(data):
    """dict → DotProductProof"""
    if not isinstance(data, dict):
        raise MalformedInputError("proof는 객체여야 합니다")
    try:
        return DotProductProof(
            delta=deserialize_g1(data["delta"]),
            beta=deserialize_g1(data["beta"]),
            z=deserialize_fr_list(data["z"]),
            z_delta=deserialize_fr(data["z_delta"]),
            z_beta=deserialize_fr(data["z_beta"]),
        )
    except KeyError as exc:
        raise MalformedInputError(f"proof 필드가 없습니다: {exc.args[0]}") from exc


# ─── VerificationResult ───

def serialize_result(result):
    """VerificationResult → dict"""
    return {
        "ok": result.ok,
        "equation": result.equation,
        "error": str(result.error) if result.error is not None else None,
        "challenge": (
            serialize_fr(result.challenge)
            if result.challenge is not None else None
        ),
    }


# ─── display helpers ───

def _shorten(s, limit=10):
    if len(s) <= limit:
        return s
    return s[:4] + "..." + s[-4:]


def g1_short(point):
    """G1 point → 축약 문자열 (로그 표시용)"""
    if point is None:
        return "∞"
    return _shorten(serialize_g1(point), limit=12)

