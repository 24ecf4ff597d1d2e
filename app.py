"""
Groupie Tracker web front-end
Blueprint-based Flask application over the groupie tracker API
"""
import os
import sys
from dotenv import load_dotenv
from flask import Flask

# Import route blueprints
from api.routes.main_routes import main_bp
from api.routes.artist_routes import artists_bp
from api.routes.search_routes import search_bp
from api.routes.error_routes import errors_bp
from utils.filters import register_filters
from utils.logger import logger

load_dotenv()

CONFIG = {
    'HOST': os.getenv('HOST', '127.0.0.1'),
    'PORT': int(os.getenv('PORT', '8080')),
    'DEBUG': os.getenv('DEBUG', 'false').lower() in ('1', 'true', 'yes'),
}


def asset_folder(name):
    """templates/ or static/ beside this file, else the copy installed under share/groupie-tracker"""
    local = os.path.join(os.path.dirname(os.path.abspath(__file__)), name)
    if os.path.isdir(local):
        return local
    return os.path.join(sys.prefix, 'share', 'groupie-tracker', name)


def create_app(config=None):
    """Application factory pattern"""
    app = Flask(__name__,
                template_folder=asset_folder('templates'),
                static_folder=asset_folder('static'))
    if config:
        app.config.update(config)

    register_filters(app)

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(artists_bp)
    app.register_blueprint(search_bp)
    app.register_blueprint(errors_bp)

    return app


# Create the Flask application
app = create_app()


if __name__ == '__main__':
    logger(f"Serving on http://{CONFIG['HOST']}:{CONFIG['PORT']}", "INFO")
    app.run(host=CONFIG['HOST'], port=CONFIG['PORT'], debug=CONFIG['DEBUG'])
