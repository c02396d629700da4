"""Commande CLI rank : classement d'un fichier de resultats d'indexeurs."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from streamrank.adapters.cli.display import (
    build_results_table,
    console,
    result_to_payload,
)
from streamrank.container import Container
from streamrank.core.value_objects.ranking import RetentionThresholds
from streamrank.core.value_objects.release import RawResult


def load_results(path: Path) -> list[RawResult]:
    """
    Charge un tableau JSON de resultats bruts.

    Args:
        path: Fichier JSON contenant une liste d'objets (title, size, age...).

    Returns:
        Liste de RawResult.

    Raises:
        ValueError: Si le fichier ne contient pas une liste d'objets.
        json.JSONDecodeError: Si le JSON est invalide.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise ValueError("le fichier doit contenir une liste d'objets JSON")
    return [RawResult.from_dict(entry) for entry in data]


def rank(
    results_file: Annotated[
        Path,
        typer.Argument(help="Fichier JSON des resultats d'indexeurs"),
    ],
    sort: Annotated[
        Optional[str],
        typer.Option("--sort", help="Quality First, Size First ou Date First"),
    ] = None,
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", help="Langue preferee (ex: German)"),
    ] = None,
    quality: Annotated[
        Optional[str],
        typer.Option("--quality", "-q", help="Filtre de qualite (ex: \"4K + 1080p\")"),
    ] = None,
    retention_days: Annotated[
        Optional[int],
        typer.Option("--retention-days", min=1, help="Retention du fournisseur en jours"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", min=1, help="Nombre maximum de releases affichees"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON (sortedResults + groupInfo)"),
    ] = False,
) -> None:
    """Filtre, regroupe par langue et trie des resultats d'indexeurs."""
    container = Container()
    config = container.config()

    try:
        raw_results = load_results(results_file)
    except (OSError, ValueError) as e:
        console.print(f"[red]Lecture impossible de {results_file} : {e}[/red]")
        raise typer.Exit(code=1)

    thresholds = config.retention_thresholds
    if retention_days is not None:
        thresholds = RetentionThresholds.from_retention(retention_days, config.fresh_days)

    service = container.pipeline_service()
    result = service.run(
        raw_results,
        sort_method=sort or config.sort_method,
        preferred_language=language or config.preferred_language,
        quality_filter=quality or config.quality_filter,
        thresholds=thresholds,
    )

    if as_json:
        typer.echo(json.dumps(result_to_payload(result), ensure_ascii=False, indent=2))
        return

    console.print(
        build_results_table(
            result,
            thresholds=thresholds,
            show_file_age=config.show_file_age,
            limit=limit,
        )
    )
    summary = f"{len(result.sorted_results)}/{len(raw_results)} releases classees"
    if result.group_info is not None:
        info = result.group_info
        summary += (
            f" ({info.preferred_count} {info.preferred_language}, "
            f"{info.fallback_count} anglais/neutre, {info.other_count} autres)"
        )
    console.print(f"[bold]{summary}[/bold]")
