from flask import Flask, jsonify
from flask_caching import Cache
from flask_cors import CORS
from flask_restx import Api

from .api.autofill import autofill_ns
from .api.bookmarks import bookmarks_ns
from .api.drafts import drafts_ns
from .api.transfer import transfer_ns
from .config import Config
from .data.seed import SEED_BOOKMARKS
from .services.bookmark_service import BookmarkService
from .services.draft_service import DraftService
from .services.storage_service import StorageService
from .services.summary_service import SummaryService
from .utils.database import BookmarkDatabase
from .utils.inflight import InFlightGuard

def create_app(config_class=Config, test_config=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    if test_config:
        app.config.update(test_config)

    # Configure CORS
    CORS(app, resources={r"/*": {
        "origins": ["chrome-extension://*", "moz-extension://*", "http://localhost:*"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
    }})

    cache = Cache(app)

    api = Api(app, version='1.0', title='TIL Bookmarks API',
              description='Local-first bookmark manager with seed bookmarks, search, drafts and JSON import/export')

    # Initialize services
    database = BookmarkDatabase(app.config['DATABASE_PATH'])
    draft_service = DraftService(database)
    bookmark_service = BookmarkService(StorageService(database), draft_service, seed=SEED_BOOKMARKS)
    summary_service = SummaryService(
        api_key=app.config.get('OPENAI_API_KEY'),
        model=app.config['OPENAI_MODEL'],
        fetch_timeout=app.config['SUMMARY_FETCH_TIMEOUT'],
    )
    in_flight = InFlightGuard()

    # Register namespaces
    api.add_namespace(bookmarks_ns)
    api.add_namespace(drafts_ns)
    api.add_namespace(transfer_ns)
    api.add_namespace(autofill_ns)

    # Inject services into namespaces
    bookmarks_ns.bookmark_service = bookmark_service
    drafts_ns.draft_service = draft_service
    transfer_ns.bookmark_service = bookmark_service
    transfer_ns.in_flight = in_flight
    autofill_ns.summary_service = summary_service
    autofill_ns.in_flight = in_flight

    app.bookmark_service = bookmark_service

    @cache.cached(timeout=300, key_prefix='service_info')
    def service_info():
        return {
            "seed_count": len(bookmark_service.seed),
            "autofill_configured": bool(app.config.get('OPENAI_API_KEY')),
        }

    @app.route('/status')
    def status():
        return jsonify({
            "status": "ready",
            **service_info(),
            "user_count": len(bookmark_service.user_bookmarks),
        }), 200

    @app.errorhandler(500)
    def handle_500_error(e):
        app.logger.error(f'An unhandled exception occurred: {str(e)}')
        return jsonify(error=str(e)), 500

    app.logger.info(f"Using bookmark store {app.config['DATABASE_PATH']}")
    return app
