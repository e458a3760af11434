import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# plafonds par défaut des solveurs exacts (recherche exhaustive O(n!), Held-Karp O(2**n · n) en mémoire)
BRUTE_FORCE_MAX_N = 10
HELD_KARP_MAX_N = 20
LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    brute_force_max_n: int = BRUTE_FORCE_MAX_N
    held_karp_max_n: int = HELD_KARP_MAX_N
    log_level: str = LOG_LEVEL


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} doit être un entier, reçu {value!r}")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Lit les plafonds et le niveau de log depuis l'environnement (et un .env éventuel).

    TSP_BRUTE_FORCE_MAX_N, TSP_HELD_KARP_MAX_N, TSP_LOG_LEVEL
    """
    load_dotenv(env_file)

    return Settings(
        brute_force_max_n=_int_from_env("TSP_BRUTE_FORCE_MAX_N", BRUTE_FORCE_MAX_N),
        held_karp_max_n=_int_from_env("TSP_HELD_KARP_MAX_N", HELD_KARP_MAX_N),
        log_level=os.getenv("TSP_LOG_LEVEL", LOG_LEVEL).upper(),
    )
