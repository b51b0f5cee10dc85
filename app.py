import logging
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, NotFound, MethodNotAllowed
from config import Config
from disk_catalog import disk_catalog
from disk_catalog.core import create_catalog
from disk_catalog.models import ErrorResponse

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────
# Application factory
# ─────────────────────────────────────────────

def create_app(config_object=Config, catalog=None):
    """
    Builds the Flask application.
    The catalog is created here and injected into the app; routes read it
    from app.extensions rather than from a module global.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Keep the declared field order in JSON bodies
    app.json.sort_keys = False

    app.extensions['disk_catalog'] = catalog if catalog is not None else create_catalog()

    CORS(
        app,
        resources={r"/api/*": {"origins": [app.config['CORS_ORIGIN']]}},
        methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['Content-Type'],
        supports_credentials=True,
    )

    app.register_blueprint(disk_catalog)
    _register_error_handlers(app)
    return app


# ─────────────────────────────────────────────
# Error handlers
# ─────────────────────────────────────────────

def _register_error_handlers(app):
    messages = {
        NotFound.code: 'Recurso no encontrado',
        MethodNotAllowed.code: 'Método no permitido',
    }

    @app.errorhandler(HTTPException)
    def http_error(e):
        message = messages.get(e.code, e.name)
        response = jsonify(ErrorResponse(message).to_dict())
        if e.code == MethodNotAllowed.code and e.valid_methods:
            response.headers['Allow'] = ', '.join(e.valid_methods)
        return response, e.code


def configure_logging(level):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )


if __name__ == '__main__':
    app = create_app()
    configure_logging(app.config['LOG_LEVEL'])
    host, port = app.config['HOST'], app.config['PORT']
    logger.info(f"Servidor corriendo en http://localhost:{port}")
    app.run(host=host, port=port, debug=app.config['DEBUG'])
