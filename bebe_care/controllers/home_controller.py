from datetime import datetime, timezone
from flask import jsonify
from bebe_care.extensions import db

def home_index():
    return jsonify({
        "message": "API funcionando correctamente",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except Exception as e:
        db.session.rollback()
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
        "server_time": datetime.now(timezone.utc).isoformat() if db_status == "healthy" else None
    })
