"""
Программа: «Uploads» – веб-приложение для загрузки файлов в объектное хранилище.
Модуль: routes/uploads.py – страницы загрузки и списка файлов.

Назначение модуля:
- Форма загрузки файла.
- Запись файла в бакет с публичным доступом и сохранение записи Upload.
- Список всех ранее загруженных файлов.
"""

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_babel import gettext as _
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models.upload import Upload
from utils.storage import get_bucket


def _save_upload(upload: Upload) -> bool:
    """Сохраняет запись в БД, при ошибке откатывает сессию и возвращает False."""
    try:
        db.session.add(upload)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Не удалось сохранить запись о загрузке %s", upload.name)
        return False
    return True


def register_routes(app):
    @app.get("/")
    def root():
        return redirect(url_for("uploads_index"))

    @app.get("/uploads/new")
    def uploads_new():
        """Пустая форма загрузки."""
        return render_template("uploads/new.html")

    @app.post("/uploads")
    def uploads_create():
        """Записывает файл в бакет и сохраняет запись о нём.

        Отсутствие поля `file` и ошибки бакета не перехватываются: они
        завершают запрос стандартной ошибкой Flask (400 и 500 соответственно).
        """
        file = request.files["file"]

        # Ключ объекта - исходное имя файла, без нормализации
        bucket = get_bucket()
        stored = bucket.write(
            file.filename,
            file.stream,
            acl="public-read",
            content_type=file.mimetype or None,
        )
        current_app.logger.info("Файл записан в бакет %s: %s", bucket.name, stored.key)

        upload = Upload(url=stored.public_url, name=stored.key)

        if _save_upload(upload):
            flash(_("File successfully uploaded"), "success")
            return redirect(url_for("uploads_index"))

        flash(_("There was an error"), "notice")
        return render_template("uploads/new.html")

    @app.get("/uploads")
    def uploads_index():
        """Список всех загрузок в порядке таблицы."""
        uploads = Upload.query.all()
        return render_template("uploads/index.html", uploads=uploads)
