"""pkgup: list and upgrade outdated JavaScript dependencies.

Detects whether npm, yarn or pnpm manages the current project, asks it for
outdated dependencies and either prints them or upgrades them to latest.
"""
