"""
Interface port pour le parsing des noms de releases.

Le parser est un collaborateur externe et faillible : le pipeline
l'appelle toujours a travers une frontiere protegee.
"""

from abc import ABC, abstractmethod

from streamrank.core.value_objects.release import ReleaseDescriptor


class IReleaseParser(ABC):
    """
    Interface pour le parsing des noms de releases.

    Definit le contrat pour extraire les informations structurees
    (resolution, codec audio, langues, source, groupe...) depuis un
    nom de release. L'implementation utilisera typiquement guessit.
    """

    @abstractmethod
    def parse(self, title: str) -> ReleaseDescriptor:
        """
        Parse un nom de release et extrait les informations structurees.

        Args:
            title: Nom de la release publie par l'indexeur

        Retourne:
            ReleaseDescriptor avec les informations extraites.
            Peut lever une exception sur un titre malforme.
        """
        ...
