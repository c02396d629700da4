"""
Adaptateurs de parsing pour StreamRank.

Ce package contient les implementations concretes des interfaces de parsing:
- GuessitReleaseParser: Parse les noms de releases avec guessit
"""
