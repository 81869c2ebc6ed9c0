import math
from dataclasses import asdict
from typing import Any

import dacite
from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response
from flask.views import MethodView

from containers import Container
from models import Agent, InvoiceBreakdown, Plan
from pricing import calculate_invoice_breakdown, effective_sample_seats, format_total, sample_usage
from repositories import AgentRepository, PlanRepository

from .plan import parse_plan
from .util import class_route, error_response, json_body, json_response

blp = Blueprint('Invoice', __name__)


def parse_seats(data: dict[str, Any]) -> int | None:
    seats = data.get('seats')
    if seats is None:
        return None
    if isinstance(seats, bool) or not isinstance(seats, int) or seats < 0:
        raise ValueError('seats must be a non-negative integer')
    return seats


def parse_usage(data: dict[str, Any], agent: Agent) -> dict[str, float]:
    usage = data.get('usage')
    if usage is None:
        return sample_usage(agent)
    if not isinstance(usage, dict):
        raise ValueError('usage must be an object mapping indicator ids to quantities')

    parsed = {}
    for indicator_id, quantity in usage.items():
        if isinstance(quantity, bool) or not isinstance(quantity, int | float):
            raise ValueError(f'Invalid usage for indicator {indicator_id}')
        try:
            quantity = float(quantity)
        except OverflowError as err:
            raise ValueError(f'Invalid usage for indicator {indicator_id}') from err
        if not math.isfinite(quantity):
            raise ValueError(f'Invalid usage for indicator {indicator_id}')
        parsed[indicator_id] = quantity
    return parsed


def invoice_breakdown_to_dict(breakdown: InvoiceBreakdown, plan: Plan, seats: int) -> dict[str, Any]:
    return {
        **asdict(breakdown),
        'currency': plan.currency,
        'seats': seats,
        'total_display': format_total(breakdown),
    }


def preview_invoice(data: dict[str, Any], plan: Plan, agent: Agent) -> Response:
    try:
        seats = effective_sample_seats(plan.seat_based, parse_seats(data))
        usage = parse_usage(data, agent)
    except ValueError as err:
        return error_response(str(err), 400)

    try:
        breakdown = calculate_invoice_breakdown(plan, agent, seats, usage)
    except OverflowError:
        return error_response('Invoice total is out of range', 400)

    if not math.isfinite(breakdown.total):
        return error_response('Invoice total is out of range', 400)

    return json_response(invoice_breakdown_to_dict(breakdown, plan, seats), 200)


@class_route(blp, '/api/v1/agents/<agent_id>/invoice')
class PreviewInvoice(MethodView):
    init_every_request = False

    @inject
    def post(self, agent_id: str, agent_repo: AgentRepository = Provide[Container.agent_repo]) -> Response:
        agent = agent_repo.get(agent_id)
        if agent is None:
            return error_response('Agent not found', 404)

        data = json_body()
        if data is None or not isinstance(data.get('plan'), dict):
            return error_response('Request body must contain a plan object', 400)

        try:
            plan = parse_plan(data['plan'], agent_id, data['plan'].get('id', ''))
        except (dacite.DaciteError, ValueError) as err:
            return error_response(f'Invalid plan: {err}', 400)

        return preview_invoice(data, plan, agent)


@class_route(blp, '/api/v1/agents/<agent_id>/plans/<plan_id>/invoice')
class PlanInvoice(MethodView):
    init_every_request = False

    @inject
    def post(
        self,
        agent_id: str,
        plan_id: str,
        agent_repo: AgentRepository = Provide[Container.agent_repo],
        plan_repo: PlanRepository = Provide[Container.plan_repo],
    ) -> Response:
        agent = agent_repo.get(agent_id)
        if agent is None:
            return error_response('Agent not found', 404)

        plan = plan_repo.get(plan_id)
        if plan is None or plan.agent_id != agent_id:
            return error_response('Plan not found', 404)

        return preview_invoice(json_body() or {}, plan, agent)
