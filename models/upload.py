"""
Программа: «Uploads» – веб-приложение для загрузки файлов в объектное хранилище.
Модуль: models/upload.py – модель загруженного файла.

Назначение модуля:
- Описание ORM-модели Upload для учёта файлов, записанных в бакет.
- Хранение публичного адреса объекта, его ключа и временных меток.
"""

from datetime import datetime
from extensions import db


class Upload(db.Model):
    """Запись о файле, успешно записанном в бакет."""
    __tablename__ = "uploads"

    id = db.Column(db.Integer, primary_key=True)
    url = db.Column(db.String(255))
    # Ключ объекта в бакете (исходное имя файла)
    name = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "url": self.url,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
