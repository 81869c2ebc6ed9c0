import copy
import re
from dataclasses import asdict
from typing import Any, TypeVar

import dacite
from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response
from flask.views import MethodView

from containers import Container
from models import (
    DACITE_CONFIG,
    PRESETS,
    Agent,
    BillingType,
    HardLimits,
    IndicatorPricing,
    Plan,
    Preset,
    SeatPricing,
    get_preset,
    now_iso,
    plan_from_dict,
    plan_to_dict,
)
from pricing import format_amount, format_price
from repositories import AgentRepository, PlanRepository

from .util import class_route, error_response, json_body, json_response

blp = Blueprint('Plan', __name__)

T = TypeVar('T')


def slugify(name: str) -> str:
    return re.sub(r'[^a-z0-9]+', '-', name.lower()).strip('-')


def create_empty_plan(agent_id: str) -> Plan:
    now = now_iso()
    return Plan(agent_id=agent_id, created_at=now, updated_at=now)


def validate_plan(plan: Plan, existing: list[Plan]) -> str | None:
    others = [p for p in existing if p.agent_id == plan.agent_id and p.id != plan.id]

    if any(p.name.lower() == plan.name.lower() for p in others):
        return 'A plan with this name already exists for this agent.'
    if any(p.slug.lower() == plan.slug.lower() for p in others):
        return 'A plan with this slug already exists for this agent.'
    return None


def merge_dataclass(data_class: type[T], base: T, overrides: dict[str, Any]) -> T:
    data = {**asdict(base), **copy.deepcopy(overrides)}  # type: ignore[call-overload]
    return dacite.from_dict(data_class=data_class, data=data, config=DACITE_CONFIG)


def build_plan_from_preset(agent_id: str, agent: Agent, preset: Preset) -> Plan:
    """Start a new, unsaved plan from ``preset``.

    Indicator pricing is only copied for indicators the agent actually has,
    and only into the map matching the indicator category.
    """
    plan = create_empty_plan(agent_id)
    plan.name = preset.name
    plan.slug = slugify(preset.name)
    plan.base_price = preset.base_price
    plan.seat_based = merge_dataclass(SeatPricing, plan.seat_based, preset.seat_based)
    plan.hard_limits = merge_dataclass(HardLimits, plan.hard_limits, preset.hard_limits)

    for indicator in agent.indicators:
        overrides = preset.pricing_map(indicator.category).get(indicator.id)
        if overrides is None:
            continue

        pricings = plan.pricing_map(indicator.category)
        current = pricings.get(indicator.id, IndicatorPricing())
        pricings[indicator.id] = merge_dataclass(IndicatorPricing, current, overrides)

    return plan


def indicator_summaries(plan: Plan, agent: Agent) -> list[str]:
    summaries = []
    for indicator in agent.indicators:
        pricing = plan.pricing_for(indicator)
        if pricing is None or not pricing.enabled:
            continue

        unit = 'min' if indicator.per_minute_enabled else 'unit'
        if pricing.billing_type == BillingType.FLAT:
            summaries.append(f'{indicator.name}: {format_amount(pricing.price, plan.currency)}/{unit}')
        else:
            summaries.append(f'{indicator.name}: {pricing.billing_type} ({len(pricing.tiers)} tiers)')

    return summaries


def plan_card_to_dict(plan: Plan, agent: Agent) -> dict[str, Any]:
    limits = plan.hard_limits
    return {
        'plan': plan_to_dict(plan),
        'base_price': format_price(plan.base_price, plan.currency),
        'billing_frequency': plan.billing_frequency.lower(),
        'setup_fee': format_price(plan.setup_fee.price, plan.currency) if plan.setup_fee.enabled else None,
        'seats': (
            {
                'price': format_price(plan.seat_based.price, plan.currency),
                'included': plan.seat_based.included_usage,
            }
            if plan.seat_based.enabled
            else None
        ),
        'indicators': indicator_summaries(plan, agent),
        'limits': (
            f'{limits.tokens_per_month:,} tokens / {limits.api_calls_per_month:,} API calls'
            if limits.tokens_per_month > 0 or limits.api_calls_per_month > 0
            else None
        ),
        'updated_at': plan.updated_at,
    }


def parse_plan(data: dict[str, Any], agent_id: str, plan_id: str) -> Plan:
    return plan_from_dict({**data, 'agent_id': agent_id, 'id': plan_id})


def stamp_plan(plan: Plan, created_at: str | None) -> Plan:
    now = now_iso()
    if not plan.slug:
        plan.slug = slugify(plan.name)
    plan.created_at = created_at or plan.created_at or now
    plan.updated_at = now
    return plan


@class_route(blp, '/api/v1/agents/<agent_id>/presets')
class ListPresets(MethodView):
    init_every_request = False

    @inject
    def get(self, agent_id: str, agent_repo: AgentRepository = Provide[Container.agent_repo]) -> Response:
        if agent_repo.get(agent_id) is None:
            return error_response('Agent not found', 404)

        return json_response(list(PRESETS), 200)


@class_route(blp, '/api/v1/agents/<agent_id>/presets/<preset_name>')
class GetPresetPlan(MethodView):
    init_every_request = False

    @inject
    def get(
        self, agent_id: str, preset_name: str, agent_repo: AgentRepository = Provide[Container.agent_repo]
    ) -> Response:
        agent = agent_repo.get(agent_id)
        if agent is None:
            return error_response('Agent not found', 404)

        try:
            preset = get_preset(preset_name)
        except ValueError as err:
            return error_response(str(err), 404)

        return json_response(plan_to_dict(build_plan_from_preset(agent_id, agent, preset)), 200)


@class_route(blp, '/api/v1/agents/<agent_id>/plans')
class AgentPlans(MethodView):
    init_every_request = False

    @inject
    def get(
        self,
        agent_id: str,
        agent_repo: AgentRepository = Provide[Container.agent_repo],
        plan_repo: PlanRepository = Provide[Container.plan_repo],
    ) -> Response:
        agent = agent_repo.get(agent_id)
        if agent is None:
            return error_response('Agent not found', 404)

        plans = plan_repo.list(agent_id)
        return json_response([plan_card_to_dict(plan, agent) for plan in plans], 200)

    @inject
    def post(
        self,
        agent_id: str,
        agent_repo: AgentRepository = Provide[Container.agent_repo],
        plan_repo: PlanRepository = Provide[Container.plan_repo],
    ) -> Response:
        if agent_repo.get(agent_id) is None:
            return error_response('Agent not found', 404)

        data = json_body()
        if data is None:
            return error_response('Request body must be a JSON object', 400)

        try:
            plan = parse_plan(data, agent_id, '')
        except (dacite.DaciteError, ValueError) as err:
            return error_response(f'Invalid plan: {err}', 400)

        stamp_plan(plan, None)
        error = validate_plan(plan, plan_repo.list(agent_id))
        if error is not None:
            return error_response(error, 409)

        return json_response(plan_to_dict(plan_repo.save(plan)), 201)


@class_route(blp, '/api/v1/agents/<agent_id>/plans/<plan_id>')
class AgentPlan(MethodView):
    init_every_request = False

    @inject
    def get(
        self,
        agent_id: str,
        plan_id: str,
        agent_repo: AgentRepository = Provide[Container.agent_repo],
        plan_repo: PlanRepository = Provide[Container.plan_repo],
    ) -> Response:
        if agent_repo.get(agent_id) is None:
            return error_response('Agent not found', 404)

        plan = plan_repo.get(plan_id)
        if plan is None or plan.agent_id != agent_id:
            return error_response('Plan not found', 404)

        return json_response(plan_to_dict(plan), 200)

    @inject
    def put(
        self,
        agent_id: str,
        plan_id: str,
        agent_repo: AgentRepository = Provide[Container.agent_repo],
        plan_repo: PlanRepository = Provide[Container.plan_repo],
    ) -> Response:
        if agent_repo.get(agent_id) is None:
            return error_response('Agent not found', 404)

        existing = plan_repo.get(plan_id)
        if existing is None or existing.agent_id != agent_id:
            return error_response('Plan not found', 404)

        data = json_body()
        if data is None:
            return error_response('Request body must be a JSON object', 400)

        try:
            plan = parse_plan(data, agent_id, plan_id)
        except (dacite.DaciteError, ValueError) as err:
            return error_response(f'Invalid plan: {err}', 400)

        stamp_plan(plan, existing.created_at)
        error = validate_plan(plan, plan_repo.list(agent_id))
        if error is not None:
            return error_response(error, 409)

        return json_response(plan_to_dict(plan_repo.save(plan)), 200)

    @inject
    def delete(
        self,
        agent_id: str,
        plan_id: str,
        agent_repo: AgentRepository = Provide[Container.agent_repo],
        plan_repo: PlanRepository = Provide[Container.plan_repo],
    ) -> Response:
        if agent_repo.get(agent_id) is None:
            return error_response('Agent not found', 404)

        plan = plan_repo.get(plan_id)
        if plan is None or plan.agent_id != agent_id:
            return error_response('Plan not found', 404)

        plan_repo.delete(plan_id)
        return json_response({'status': 'Ok'}, 200)
