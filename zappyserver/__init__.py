"""Tick-driven Zappy game server: world map, teams, players and TCP command handling."""

__version__ = "0.0.1"