"""Server settings read from the command line."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field
from itertools import takewhile
from typing import Callable, TypeVar

from termcolor import colored

T = TypeVar("T")

_U32_PATTERN = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFFFFFF


class SettingsError(ValueError):
    """A command-line argument is missing or invalid."""


@dataclass
class ServerSettings:
    port: int
    width: int
    height: int
    connexion_max: int
    time_unit: float
    teams_name: list[str] = field(default_factory=list)


def _parse_u32(text: str) -> int | None:
    if _U32_PATTERN.fullmatch(text) is None:
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def _parse_f64(text: str) -> float | None:
    if not text or "_" in text or any(ch.isspace() for ch in text):
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _flag_value(args: list[str], flag: str, parse: Callable[[str], T | None]) -> T:
    option = f"-{flag}"
    for arg, candidate in zip(args, args[1:]):
        if arg == option and not candidate.startswith("-"):
            value = parse(candidate)
            if value is not None:
                return value
    raise SettingsError(f"Erreur: argument -{flag} non trouvé ou invalide")


def _teams(args: list[str]) -> list[str]:
    try:
        start = args.index("-n")
    except ValueError:
        raise SettingsError("Erreur: flag -n manquant") from None
    teams = list(takewhile(lambda arg: not arg.startswith("-"), args[start + 1 :]))
    if not teams:
        raise SettingsError("Erreur: au moins une équipe est requise après -n")
    return teams


def parse_settings(args: list[str] | None = None) -> ServerSettings:
    """Read settings from ``args`` (the arguments after the program name)."""
    if args is None:
        args = sys.argv[1:]
    args = list(args)
    return ServerSettings(
        port=_flag_value(args, "p", _parse_u32),
        height=_flag_value(args, "x", _parse_u32),
        width=_flag_value(args, "y", _parse_u32),
        connexion_max=_flag_value(args, "c", _parse_u32),
        time_unit=_flag_value(args, "t", _parse_f64),
        teams_name=_teams(args),
    )


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_banner(settings: ServerSettings) -> str:
    """Return the start-up summary of the settings."""

    def label(text: str) -> str:
        return colored(text, "green", attrs=["bold"])

    def bold(text: str) -> str:
        return colored(text, attrs=["bold"])

    lines = [
        label("🟩=============== Zappy Server ===============🟩"),
        f"{label('🌐 IP Address :')} "
        f"{colored(f'127.0.0.1:{settings.port}', attrs=['bold', 'underline'])}",
        f"{label('📏 Map Size   :')} {bold(f'{settings.width} x {settings.height} px')}",
        f"{label('👥 Connexion Max :')} {bold(str(settings.connexion_max))}",
        f"{label('⏱️  Time Unit  :')} {bold(_format_number(settings.time_unit) + 't')}",
        f"{label('🏳️  Teams      :')} {bold(', '.join(settings.teams_name))}",
        label("================================================\n"),
    ]
    return "\n".join(lines)