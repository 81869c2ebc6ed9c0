from dataclasses import asdict

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response
from flask.views import MethodView

from containers import Container
from repositories import AgentRepository

from .util import class_route, error_response, json_response

blp = Blueprint('Agent', __name__)


@class_route(blp, '/api/v1/agents/<agent_id>')
class GetAgent(MethodView):
    init_every_request = False

    @inject
    def get(self, agent_id: str, agent_repo: AgentRepository = Provide[Container.agent_repo]) -> Response:
        agent = agent_repo.get(agent_id)
        if agent is None:
            return error_response('Agent not found', 404)

        return json_response(asdict(agent), 200)
