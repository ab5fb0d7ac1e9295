from .home_routes import home_bp
from .auth_routes import auth_bp
from .patient_routes import patient_bp
from .anthropometry_routes import anthropometry_bp
from .appointment_routes import appointment_bp
from .consultation_routes import consultation_bp
from .meal_plan_routes import meal_plan_bp
from .progress_routes import progress_bp


def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(patient_bp)
    app.register_blueprint(anthropometry_bp)
    app.register_blueprint(appointment_bp)
    app.register_blueprint(consultation_bp)
    app.register_blueprint(meal_plan_bp)
    app.register_blueprint(progress_bp)
