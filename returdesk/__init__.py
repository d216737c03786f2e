from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_socketio import SocketIO
from dotenv import load_dotenv
import logging

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(cors_allowed_origins="*")

logger = logging.getLogger(__name__)

LIFECYCLE_EXTENSION = "returdesk.lifecycle"


def _build_repository(app):
    from .core.repository import InMemoryReturnRepository, SqlAlchemyReturnRepository

    backend = app.config.get('STORAGE_BACKEND', 'sql')
    if backend == 'sql':
        return SqlAlchemyReturnRepository(db)
    if backend == 'memory':
        return InMemoryReturnRepository()
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def create_app(config_object='returdesk.config.config.Config'):
    load_dotenv()
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    CORS(app, origins=app.config.get('CORS_ORIGINS', []), supports_credentials=True)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    socketio.init_app(app, async_mode=app.config.get('SOCKETIO_ASYNC_MODE'))

    # Import models
    from .models.retur import Retur

    if app.config.get('AUTO_CREATE_TABLES'):
        with app.app_context():
            db.create_all()

    # One lifecycle manager per process: it owns the undo stack and the id pool
    from .core.lifecycle import ReturnLifecycle
    app.extensions[LIFECYCLE_EXTENSION] = ReturnLifecycle(_build_repository(app))

    # Import routes
    from .routes.returs import returs_bp

    # Register blueprints
    app.register_blueprint(returs_bp, url_prefix=app.config.get('RETURS_URL_PREFIX') or None)

    logger.info(f"returdesk ready, storage backend: {app.config.get('STORAGE_BACKEND')}")
    return app
