# bizlens/api/routes.py

from bizlens.api.endpoints.search import bp as search_bp

def register_api(app):
    # Register all API blueprints under /api
    app.register_blueprint(search_bp, url_prefix="/api")
