"""
Affichage des resultats du pipeline dans le terminal.

Ce module fournit :
- console : instance Rich Console partagee
- build_results_table : tableau Rich avec separateurs de groupes
- result_to_payload : conversion JSON (format consomme par le front end)
"""

from typing import Any, Optional

from rich.console import Console
from rich.table import Table

from streamrank.core.value_objects.ranking import PipelineResult, RetentionThresholds
from streamrank.core.value_objects.release import ScoredItem
from streamrank.services.display_formatter import format_stream_title

console = Console()

_GROUP_HEADERS = (
    "[bold green]Langue preferee[/bold green]",
    "[bold cyan]Anglais / neutre[/bold cyan]",
    "[bold yellow]Autres langues[/bold yellow]",
)


def _group_starts(result: PipelineResult) -> dict[int, str]:
    """Index de debut de chaque groupe non vide -> titre du separateur."""
    info = result.group_info
    if info is None:
        return {}
    bounds = (
        (0, info.preferred_count),
        (info.group1_end, info.fallback_count),
        (info.group2_end, info.other_count),
    )
    return {
        start: header
        for (start, count), header in zip(bounds, _GROUP_HEADERS)
        if count > 0
    }


def build_results_table(
    result: PipelineResult,
    thresholds: Optional[RetentionThresholds] = None,
    show_file_age: bool = True,
    limit: Optional[int] = None,
) -> Table:
    """
    Construit le tableau des releases classees.

    Args:
        result: Sortie du pipeline.
        thresholds: Seuils de retention pour l'indicateur d'age.
        show_file_age: Affiche l'age dans la derniere ligne.
        limit: Nombre maximum de releases affichees.

    Returns:
        Table Rich prete a etre imprimee.
    """
    table = Table(show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Release")
    table.add_column("Details")

    starts = _group_starts(result)
    items = result.sorted_results[:limit] if limit else result.sorted_results

    for index, item in enumerate(items):
        if index in starts:
            table.add_row("", starts[index], "")
        title = format_stream_title(
            item.descriptor,
            size=item.raw.size,
            indexer=item.raw.indexer,
            age=item.raw.age,
            thresholds=thresholds,
            show_file_age=show_file_age,
        )
        table.add_row(str(index + 1), item.raw.title, title.as_text())

    return table


def _item_to_payload(item: ScoredItem) -> dict[str, Any]:
    descriptor = item.descriptor
    return {
        "title": item.raw.title,
        "downloadUrl": item.raw.download_url,
        "size": item.raw.size,
        "age": item.raw.age,
        "indexer": item.raw.indexer,
        "parsed": {
            "resolution": descriptor.resolution,
            "audioCodec": descriptor.audio_codec,
            "audioChannels": descriptor.audio_channels,
            "languages": sorted(descriptor.languages),
            "multi": descriptor.multi,
            "sources": list(descriptor.sources),
            "edition": {
                "remux": descriptor.edition.remux,
                "hdr": descriptor.edition.hdr,
                "dolbyVision": descriptor.edition.dolby_vision,
            },
            "group": descriptor.group,
        },
    }


def result_to_payload(result: PipelineResult) -> dict[str, Any]:
    """Convertit la sortie du pipeline en dictionnaire serialisable JSON."""
    info = result.group_info
    group_info = None
    if info is not None:
        group_info = {
            "preferredLanguage": info.preferred_language,
            "preferredCount": info.preferred_count,
            "englishCount": info.fallback_count,
            "otherCount": info.other_count,
            "group1End": info.group1_end,
            "group2End": info.group2_end,
        }
    return {
        "sortedResults": [_item_to_payload(item) for item in result.sorted_results],
        "groupInfo": group_info,
    }
