from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from nutriapp.extensions import db


def home_index():
    backend = current_app.config.get("STORAGE_BACKEND")
    db_status = "n/a"
    if backend == "sqlalchemy":
        db_status = "healthy"
        try:
            db.session.execute(db.text("SELECT 1"))
        except SQLAlchemyError as e:
            db_status = f"unhealthy: {e}"
    return jsonify({
        "message": "NutriApp backend is running",
        "storage": backend,
        "database": db_status,
    })
