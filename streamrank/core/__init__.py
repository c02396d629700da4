"""
Couche domaine (core).

Contient les ports (interfaces abstraites) et les objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- ports/ : Interfaces abstraites (parser de releases, observateur du pipeline)
- value_objects/ : Objets valeur immutables (RawResult, ReleaseDescriptor, Tier)
"""
