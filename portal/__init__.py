import os
import logging
from flask import Flask
from dotenv import load_dotenv

PKG_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_HOME = "/opt/activedirectory-portal"

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _load_env(home):
    # Load .env early; real environment wins
    load_dotenv(dotenv_path=os.path.join(home, ".env"), override=False)

    # Optionally load extra env fragments (e.g., .env.d/*)
    envd = os.path.join(home, ".env.d")
    if os.path.isdir(envd):
        for name in sorted(os.listdir(envd)):
            p = os.path.join(envd, name)
            if os.path.isfile(p):
                load_dotenv(dotenv_path=p, override=True)


def _settings_from_env():
    return {
        "SECRET_KEY": os.getenv("SECRET_KEY", "CHANGE_ME_DEV_ONLY"),
        "TEMPLATE_FOLDER": os.getenv("TEMPLATE_FOLDER", os.path.join(PKG_DIR, "templates")),
        "STATIC_FOLDER": os.getenv("STATIC_FOLDER", os.path.join(PKG_DIR, "static")),
        "VIEW_SUFFIX": os.getenv("VIEW_SUFFIX", ".html"),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "info"),
    }


def _configure_logging(app):
    # Under gunicorn, share its error log handlers
    gunicorn_logger = logging.getLogger("gunicorn.error")
    if gunicorn_logger.handlers:
        app.logger.handlers = gunicorn_logger.handlers
    app.logger.setLevel(app.config["LOG_LEVEL"].upper())


def create_app(config=None):
    _load_env(os.getenv("PORTAL_HOME", DEFAULT_HOME))

    settings = _settings_from_env()
    if config:
        settings.update(config)
    settings["LOG_LEVEL"] = settings["LOG_LEVEL"].lower()

    if settings["LOG_LEVEL"] not in LOG_LEVELS:
        raise RuntimeError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got {settings['LOG_LEVEL']!r}")
    if not settings["VIEW_SUFFIX"]:
        raise RuntimeError("VIEW_SUFFIX must not be empty")

    app = Flask(
        __name__,
        template_folder=settings["TEMPLATE_FOLDER"],
        static_folder=settings["STATIC_FOLDER"],
    )
    app.config.update(settings)

    _configure_logging(app)

    # Blueprints
    from .routes import bp as web_bp
    app.register_blueprint(web_bp)   # /, /login

    app.logger.debug("portal app created (templates=%s)", app.template_folder)
    return app
