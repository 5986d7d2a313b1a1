"""
Container d'injection de dependances via dependency-injector.

Fournit les dependances de l'interface terminal et des commandes CLI :
configuration, base de donnees, repository, client Trakt, DataManager et App.
"""

from dependency_injector import containers, providers

from .adapters.api.trakt_client import TraktClient
from .config import Settings
from .infrastructure.persistence.database import create_session, init_db
from .infrastructure.persistence.repositories import SQLModelShowRepository
from .interface.app import App
from .services.data_manager import DataManager


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        app = container.app()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(
        init_db,
        database_url=config.provided.database_url,
    )

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(create_session)

    # Repository - Factory : la boucle interactive et le worker du
    # DataManager ont chacun leur instance (et leur session)
    show_repository = providers.Factory(
        SQLModelShowRepository,
        session=session,
    )

    # Client API - Singleton avec client id depuis config
    trakt_client = providers.Singleton(
        TraktClient,
        client_id=config.provided.trakt_client_id,
        base_url=config.provided.trakt_base_url,
    )

    # DataManager - le worker construit son store dans son propre thread
    data_manager = providers.Factory(
        DataManager.init,
        store_factory=show_repository.provider,
    )

    app = providers.Factory(
        App,
        data_manager=data_manager,
        client=trakt_client,
        store=show_repository,
    )
