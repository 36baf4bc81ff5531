"""
Модуль: `utils/storage.py`.
Назначение: Запись файлов в бакет S3 и построение публичных ссылок на объекты.
"""

from dataclasses import dataclass
from urllib.parse import quote

import boto3
from flask import current_app


@dataclass(frozen=True)
class StoredObject:
    """Объект, записанный в бакет."""
    key: str
    public_url: str


class S3Bucket:
    """Обёртка над клиентом boto3 для одного бакета."""

    def __init__(self, client, name: str, region: str, endpoint_url: str | None = None,
                 public_base_url: str | None = None):
        self.client = client
        self.name = name
        self.region = region
        self.endpoint_url = endpoint_url
        self.public_base_url = public_base_url

    def write(self, key: str, fileobj, acl: str = "public-read", content_type: str | None = None) -> StoredObject:
        """Записывает поток в бакет под ключом `key` с указанным ACL."""
        extra_args = {"ACL": acl}
        if content_type:
            extra_args["ContentType"] = content_type

        # Существующий объект с тем же ключом перезаписывается
        self.client.upload_fileobj(fileobj, self.name, key, ExtraArgs=extra_args)
        return StoredObject(key=key, public_url=self.public_url(key))

    def public_url(self, key: str) -> str:
        """Возвращает публичный адрес объекта по ключу."""
        quoted_key = quote(key, safe="/~")
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{quoted_key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.name}/{quoted_key}"
        return f"https://{self.name}.s3.{self.region}.amazonaws.com/{quoted_key}"


def create_s3_client(config):
    """Создаёт клиент S3 по параметрам конфигурации приложения."""
    client_kwargs = {"region_name": config["AWS_REGION"]}
    if config.get("S3_ENDPOINT_URL"):
        client_kwargs["endpoint_url"] = config["S3_ENDPOINT_URL"]
    if config.get("AWS_ACCESS_KEY_ID") and config.get("AWS_SECRET_ACCESS_KEY"):
        client_kwargs["aws_access_key_id"] = config["AWS_ACCESS_KEY_ID"]
        client_kwargs["aws_secret_access_key"] = config["AWS_SECRET_ACCESS_KEY"]
    return boto3.client("s3", **client_kwargs)


def init_bucket(app) -> S3Bucket:
    """Создаёт бакет приложения и регистрирует его в `app.extensions`."""
    cfg = app.config
    bucket = S3Bucket(
        client=create_s3_client(cfg),
        name=cfg["S3_BUCKET"],
        region=cfg["AWS_REGION"],
        endpoint_url=cfg.get("S3_ENDPOINT_URL"),
        public_base_url=cfg.get("S3_PUBLIC_URL"),
    )
    app.extensions["s3_bucket"] = bucket
    return bucket


def get_bucket() -> S3Bucket:
    """Возвращает бакет текущего приложения."""
    return current_app.extensions["s3_bucket"]
