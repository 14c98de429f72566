from flask import Flask

from .config import Config
from .controllers.statements import bp as statements_bp
from .models.catalog import Catalog


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("VIDEO_RENTAL")
    if test_config:
        app.config.update(test_config)

    catalog = Catalog.instance()
    if app.config["SEED_DEMO_DATA"]:
        from .services.demo import seed_demo_catalog
        seed_demo_catalog(catalog)
    app.register_blueprint(statements_bp)

    return app
