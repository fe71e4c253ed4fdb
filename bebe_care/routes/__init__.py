from .home_routes import home_bp
from .food_routes import food_bp
from .exposure_routes import exposure_bp
from .check_routes import check_bp
from .recipe_routes import recipe_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(exposure_bp)
    app.register_blueprint(check_bp)
    app.register_blueprint(recipe_bp)
