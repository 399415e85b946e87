import logging
from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from app import config
from app.store import Storage
from app.utils import handle_http_error

logger = logging.getLogger(__name__)

def create_app(test_config=None, store=None):
    app = Flask(__name__, static_folder=config.STATIC_DIR, static_url_path='')
    app.config.from_object(config)
    if test_config:
        app.config.update(test_config)

    CORS(app,
         resources={r"/*": {"origins": "*", "methods": ["GET", "POST"], "allow_headers": ["Content-Type"]}}
    )

    # Initialize storage, a failure here aborts startup
    if store is None:
        store = Storage()
        store.init_data(app.config['STORAGE_PATH'])
    app.extensions['motd_store'] = store

    # Register Blueprints
    from app.routes.messages import messages_bp
    from app.routes.misc import misc_bp

    app.register_blueprint(messages_bp)
    app.register_blueprint(misc_bp)

    app.register_error_handler(HTTPException, handle_http_error)

    logger.info("motd app ready")
    return app
