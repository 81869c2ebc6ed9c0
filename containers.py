from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer, WiringConfiguration

from repositories.firestore import FirestorePlanRepository
from repositories.static import DEFAULT_AGENTS, StaticAgentRepository


class Container(DeclarativeContainer):
    wiring_config = WiringConfiguration(packages=['blueprints'])
    config = providers.Configuration()

    plan_repo = providers.ThreadSafeSingleton(
        FirestorePlanRepository,
        database=config.firestore.database,
        storage_key=config.storage.key,
    )

    agent_repo = providers.ThreadSafeSingleton(StaticAgentRepository, agents=DEFAULT_AGENTS)
