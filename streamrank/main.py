"""
Point d'entrée CLI de StreamRank.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import rank
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="streamrank",
    help="Classement des releases Usenet pour le streaming",
)
container = Container()


def _console_level(verbose: int, quiet: bool) -> str:
    """Niveau stderr derive des options -v / --quiet."""
    if quiet:
        return "ERROR"
    return "DEBUG" if verbose else "INFO"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Afficher le detail des exclusions"),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """StreamRank - Classement des releases Usenet."""
    if not verbose and not quiet:
        return
    settings = get_config()
    configure_logging(
        log_level=_console_level(verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(rank)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    thresholds = config.retention_thresholds
    typer.echo(f"Tri : {config.sort_method}")
    typer.echo(f"Langue préférée : {config.preferred_language or 'aucune'}")
    typer.echo(f"Filtre de qualité : {config.quality_filter}")
    if thresholds is None:
        typer.echo("Retention : désactivée")
    else:
        typer.echo(
            f"Retention : {thresholds.retention_days} jours "
            f"(vieillissant {thresholds.aging_days} j, avertissement "
            f"{thresholds.warning_days} j, exclusion > {thresholds.filter_days} j)"
        )
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"StreamRank v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de StreamRank", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
