import os

from flask import Flask
from gcp_microservice_utils import setup_cloud_logging, setup_cloud_trace

from blueprints import BlueprintAgent, BlueprintHealth, BlueprintInvoice, BlueprintPlan, BlueprintReset
from containers import Container


class FlaskMicroservice(Flask):
    container: Container


def create_app() -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':  # pragma: no cover
        setup_cloud_logging()

    app = FlaskMicroservice(__name__)
    app.container = Container()

    app.container.config.firestore.database.from_env('FIRESTORE_DATABASE', '(default)')
    app.container.config.storage.key.from_env('PLAN_STORAGE_KEY', 'agent_plans')

    if os.getenv('ENABLE_CLOUD_TRACE') == '1':  # pragma: no cover
        setup_cloud_trace(app)

    app.register_blueprint(BlueprintAgent)
    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintReset)
    app.register_blueprint(BlueprintPlan)
    app.register_blueprint(BlueprintInvoice)

    return app
