"""
Название: «Uploads»
Язык: Python (Flask)
Краткое описание: веб-приложение для загрузки файлов в бакет S3 и просмотра списка загрузок
"""

import hmac
import os
import secrets

from flask import (
    Flask,
    abort,
    flash,
    g,
    jsonify,
    redirect,
    request,
    session,
    url_for,
)

from config import Config
from extensions import db, cors, babel
import models  # noqa: F401 - регистрирует модели для db.create_all()
from routes.uploads import register_routes as register_upload_routes
from routes.api import register_routes as register_api_routes
from flask_babel import gettext as _
from utils.i18n import is_supported_language, resolve_request_language
from utils.storage import init_bucket


def create_app(test_config: dict | None = None) -> Flask:
    """Фабрика приложения, собирающая все модули воедино."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config is not None:
        app.config.from_mapping(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Инициализация расширений
    db.init_app(app)

    def select_locale() -> str:
        return getattr(g, "lang", app.config["DEFAULT_LANGUAGE"])

    babel.init_app(app, locale_selector=select_locale)

    if app.config["CORS_ENABLED"]:
        cors.init_app(
            app,
            resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        )

    init_bucket(app)

    os.makedirs(app.instance_path, exist_ok=True)

    # Регистрация роутов по модулям
    register_upload_routes(app)
    register_api_routes(app)

    with app.app_context():
        # Создаем отсутствующие таблицы; схема в production ведётся миграциями Alembic
        db.create_all()

    def _ensure_csrf_token() -> str:
        token = session.get("csrf_token")
        if not token:
            token = secrets.token_urlsafe(32)
            session["csrf_token"] = token
        return token

    def _is_csrf_valid() -> bool:
        expected = session.get("csrf_token")
        provided = request.headers.get("X-CSRF-Token") or request.form.get("csrf_token")
        if not expected or not provided:
            return False
        return hmac.compare_digest(expected, provided)

    @app.before_request
    def resolve_request_language_middleware():
        """Определяет язык интерфейса для текущего запроса."""
        g.lang = resolve_request_language(
            request=request,
            supported_languages=app.config["SUPPORTED_LANGUAGES"],
            cookie_name=app.config["LANG_COOKIE_NAME"],
            default_language=app.config["DEFAULT_LANGUAGE"],
        )

    @app.context_processor
    def inject_template_globals():
        return {
            "csrf_token": _ensure_csrf_token(),
            "current_lang": getattr(g, "lang", app.config["DEFAULT_LANGUAGE"]),
            "supported_langs": app.config["SUPPORTED_LANGUAGES"],
        }

    @app.before_request
    def enforce_csrf():
        """Отклоняет изменяющие запросы без корректного CSRF-токена."""
        if request.method in {"GET", "HEAD", "OPTIONS", "TRACE"}:
            return None

        if request.endpoint in {"healthz"}:
            return None

        if _is_csrf_valid():
            return None

        if request.path.startswith("/api/"):
            return (
                jsonify(
                    {
                        "success": False,
                        "error": _("Invalid CSRF token. Reload the page and try again."),
                    }
                ),
                400,
            )

        flash(_("The form has expired. Reload the page and try again."), "error")
        return redirect(request.referrer or url_for("uploads_new"))

    @app.after_request
    def apply_security_headers(response):
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Permissions-Policy", "camera=(), microphone=(), geolocation=()")
        return response

    @app.get("/language/<lang>")
    def set_language(lang):
        """Запоминает выбранный язык в cookie и возвращает на предыдущую страницу."""
        supported_languages: tuple[str, ...] = app.config["SUPPORTED_LANGUAGES"]
        if not is_supported_language(lang, supported_languages):
            abort(404)

        response = redirect(request.referrer or url_for("uploads_index"))
        response.set_cookie(
            app.config["LANG_COOKIE_NAME"],
            lang.strip().lower(),
            max_age=app.config["LANG_COOKIE_MAX_AGE"],
            secure=app.config["SESSION_COOKIE_SECURE"],
            httponly=False,
            samesite="Lax",
            path="/",
        )
        return response

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    return app


app = create_app()


if __name__ == "__main__":
    is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
    app.run(debug=not is_production)
