"""
Dot-product Flask Blueprint
============================

상위 증명 시스템(또는 외부 클라이언트)이 JSON으로 dot-product 증명을
검증받는 엔드포인트.

  POST /dotprod/verify                  증명 검증 + 결과 기록
  GET  /dotprod/verifications           검증 기록 조회
  POST /dotprod/verifications/delete    검증 기록 삭제
"""

from functools import lru_cache

from flask import Blueprint, current_app, jsonify, request
from tinydb import Query

from hyrax.dotprod.commitments import DotProductProofGens
from hyrax.dotprod.errors import MalformedInputError
from hyrax.dotprod.verifier import verify

from dotprod_serializers import (
    deserialize_fr_list,
    deserialize_g1,
    deserialize_proof,
    serialize_result,
    g1_short,
)

dotprod_bp = Blueprint('dotprod', __name__, url_prefix='/dotprod')

DATA = Query()

RECORD_TYPE = "dotprod.verification"

# DB는 app.py에서 주입
DB = None


def init_dotprod_bp(db):
    """app.py에서 DB를 주입받는다."""
    global DB
    DB = db


# ─── DB 헬퍼 ───

def db_insert_record(record):
    """검증 기록을 저장한다."""
    DB.insert({"type": RECORD_TYPE, "data": record})


def db_records():
    """저장된 검증 기록을 모두 조회한다."""
    return [row["data"] for row in DB.search(DATA.type == RECORD_TYPE)]


def db_clear_records():
    """검증 기록을 모두 삭제한다."""
    DB.remove(DATA.type == RECORD_TYPE)


# ─── 생성자 캐시 ───

@lru_cache(maxsize=32)
def get_gens(n, label):
    """(n, label)별 생성자. 생성 비용이 크므로 캐시한다."""
    return DotProductProofGens(n, label)


def _check_dimension_limit(name, values):
    """역직렬화 전에 원시 리스트 길이를 제한한다."""
    max_dimension = current_app.config["DOTPROD_MAX_DIMENSION"]
    if isinstance(values, list) and len(values) > max_dimension:
        raise MalformedInputError(
            f"{name} 차원 {len(values)}가 최대값 {max_dimension}을 초과합니다"
        )


def _parse_request(body):
    if not isinstance(body, dict):
        raise MalformedInputError("JSON 객체가 필요합니다")
    try:
        _check_dimension_limit("a", body["a"])
        if isinstance(body["proof"], dict):
            _check_dimension_limit("z", body["proof"].get("z"))

        tau = deserialize_g1(body["tau"])
        com_poly = deserialize_g1(body["com_poly"])
        a = deserialize_fr_list(body["a"])
        proof = deserialize_proof(body["proof"])
    except KeyError as exc:
        raise MalformedInputError(f"필드가 없습니다: {exc.args[0]}") from exc

    label = body.get("gens_label", current_app.config["DOTPROD_GENS_LABEL"])
    if not isinstance(label, str):
        raise MalformedInputError("gens_label은 문자열이어야 합니다")
    return tau, com_poly, a, proof, label


# ──────────────────────────────────────────────────────────────
# 검증
# ──────────────────────────────────────────────────────────────

@dotprod_bp.route("/verify", methods=["POST"])
def verify_proof():
    """JSON 요청의 dot-product 증명을 검증한다."""
    try:
        tau, com_poly, a, proof, label = _parse_request(
            request.get_json(silent=True)
        )
    except MalformedInputError as exc:
        current_app.logger.info("malformed verify request: %s", exc)
        return jsonify({"ok": False, "equation": None, "error": str(exc),
                        "challenge": None}), 400

    gens = get_gens(len(a), label.encode())
    result = verify(tau, a, proof, com_poly, gens.gens_1, gens.gens_n)
    payload = serialize_result(result)

    current_app.logger.info(
        "dotprod verify D=%d tau=%s ok=%s equation=%s",
        len(a), g1_short(tau), result.ok, result.equation,
    )

    db_insert_record({
        "dimension": len(a),
        "gens_label": label,
        "tau": g1_short(tau),
        **payload,
    })

    if isinstance(result.error, MalformedInputError):
        return jsonify(payload), 400
    return jsonify(payload)


# ──────────────────────────────────────────────────────────────
# 기록
# ──────────────────────────────────────────────────────────────

@dotprod_bp.route("/verifications")
def list_verifications():
    """저장된 검증 기록 목록."""
    return jsonify(db_records())


@dotprod_bp.route("/verifications/delete", methods=["POST"])
def delete_verifications():
    """검증 기록을 모두 삭제한다."""
    db_clear_records()
    return jsonify({"deleted": True})
