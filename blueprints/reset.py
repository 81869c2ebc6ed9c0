from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response
from flask.views import MethodView

from containers import Container
from repositories import PlanRepository

from .util import class_route, json_response

blp = Blueprint('Reset database', __name__)


@class_route(blp, '/api/v1/reset/plan')
class ResetDB(MethodView):
    init_every_request = False

    @inject
    def post(self, plan_repo: PlanRepository = Provide[Container.plan_repo]) -> Response:
        plan_repo.delete_all()

        return json_response({'status': 'Ok'}, 200)
