"""
Программа: «Uploads» – веб-приложение для загрузки файлов в объектное хранилище.
Модуль: routes/api.py – JSON-маршруты.

Назначение модуля:
- Выдача списка загруженных файлов в формате JSON.
"""

from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from models.upload import Upload


def _api_error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def register_routes(app):
    @app.get("/api/uploads")
    def api_uploads():
        """Список загрузок в том же порядке, что и HTML-страница."""
        try:
            uploads = Upload.query.all()
        except SQLAlchemyError:
            current_app.logger.exception("Ошибка чтения списка загрузок")
            return _api_error("Internal server error", 500)

        return jsonify(
            {
                "success": True,
                "uploads": [upload.to_dict() for upload in uploads],
            }
        )
