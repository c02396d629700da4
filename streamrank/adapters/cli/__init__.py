"""Sous-package CLI - re-exporte les commandes publiques."""

from streamrank.adapters.cli.commands import rank

__all__ = [
    "rank",
]
