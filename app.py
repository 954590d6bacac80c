"""
Dot-product 검증 서비스
========================

Flask 앱과 TinyDB 저장소를 구성하고 dot-product 블루프린트를 등록한다.

설정 (환경 변수로 덮어쓸 수 있음):
    SECRET_KEY              Flask 세션 키
    DOTPROD_DB_PATH         TinyDB 파일 경로 (":memory:"이면 MemoryStorage)
    DOTPROD_GENS_LABEL      생성자 도출 레이블
    DOTPROD_MAX_DIMENSION   허용하는 최대 벡터 차원

실행:
    $ flask --app app run
"""

import logging
import os

from flask import Flask
from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from hyrax.dotprod.commitments import DEFAULT_GENS_LABEL

from dotprod_routes import dotprod_bp, init_dotprod_bp


DEFAULT_CONFIG = {
    "SECRET_KEY": "key",
    "DOTPROD_DB_PATH": "db.json",
    "DOTPROD_GENS_LABEL": DEFAULT_GENS_LABEL.decode(),
    "DOTPROD_MAX_DIMENSION": 1024,
}


def load_config(overrides=None):
    """기본값 ← 환경 변수 ← overrides 순으로 설정을 합친다."""
    config = dict(DEFAULT_CONFIG)
    for key, default in DEFAULT_CONFIG.items():
        if key in os.environ:
            config[key] = type(default)(os.environ[key])
    if overrides:
        config.update(overrides)
    return config


def open_db(path):
    if path == ":memory:":
        return TinyDB(storage=MemoryStorage)  # Memory DB
    return TinyDB(path)                       # Storage DB


def create_app(config=None):
    """Flask 앱을 만든다.

    Args:
        config: 설정 덮어쓰기 (테스트에서 사용)
    """
    app = Flask(__name__)
    app.config.update(load_config(config))

    db = open_db(app.config["DOTPROD_DB_PATH"])
    init_dotprod_bp(db.table("dotprod"))
    app.register_blueprint(dotprod_bp)
    app.extensions["dotprod_db"] = db

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True)
