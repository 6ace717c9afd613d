from flask import Flask
from flask_cors import CORS

from neobind.config.config import Config
from neobind.store.binding_store import CsvBindingStore, StoreUnavailable
from neobind.verify import AlwaysAcceptVerifier


def create_app(config=None, store=None, verifier=None) -> Flask:
    # public/ is served at the site root, same as the page assets expect
    app = Flask(__name__, static_folder="public", static_url_path="")
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False
    )

    # ---- Collaborators: binding table and signature policy ----
    app.extensions["neobind.store"] = store if store is not None else CsvBindingStore(app.config["DATA_FILE"])
    app.extensions["neobind.verifier"] = verifier if verifier is not None else AlwaysAcceptVerifier()

    from neobind.routes import core_bp
    from neobind.bind.bind_routes import bind_bp
    from neobind.search.search_routes import search_bp
    app.register_blueprint(core_bp)
    app.register_blueprint(bind_bp)
    app.register_blueprint(search_bp)

    @app.errorhandler(StoreUnavailable)
    def store_unavailable(e):
        print(f"[Store Error] {e}")
        return "Binding data is unavailable.", 500

    return app
