"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et pour
les gestionnaires de requetes qui consomment le pipeline.
"""

from dependency_injector import containers, providers

from .adapters.parsing.guessit_parser import GuessitReleaseParser
from .config import Settings
from .services.pipeline import StreamPipelineService
from .services.pipeline_observer import LoguruPipelineObserver


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.pipeline_service()
        result = service.run(results, preferred_language="German")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    release_parser = providers.Singleton(GuessitReleaseParser)
    pipeline_observer = providers.Singleton(LoguruPipelineObserver)

    # Services - sans etat, une instance par appel
    pipeline_service = providers.Factory(
        StreamPipelineService,
        parser=release_parser,
        observer=pipeline_observer,
    )
