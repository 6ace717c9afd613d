# neobind/routes.py
from flask import Blueprint, current_app, jsonify, render_template

core_bp = Blueprint("core", __name__)

@core_bp.get("/")
def index():
    return render_template("index.html")

@core_bp.get("/health")
def health():
    return jsonify({"status": "ok"}), 200

@core_bp.get("/version")
def version():
    return jsonify({
        "name": "neobind",
        "env": current_app.config.get("APP_ENV", "production")
    }), 200
