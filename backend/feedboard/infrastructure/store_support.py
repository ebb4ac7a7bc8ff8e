"""Helpers shared by every article store backing."""

from datetime import datetime, timedelta, timezone

_TICK = timedelta(microseconds=1)

# Example feed used to seed an empty store on startup.
SEED_ARTICLES: list[dict] = [
    {
        "title": "Atardecer en la ciudad",
        "description": "Un clip corto mostrando luces y movimiento. Minimalismo, ritmo y color.",
        "author": "UsuarioDemo",
        "views": 2100,
        "likes": 128,
    },
    {
        "title": "Cocina express",
        "description": "Recetas rápidas, limpias y con ritmo. Ideal para la semana.",
        "author": "ChefDemo",
        "views": 15000,
        "likes": 3200,
    },
    {
        "title": "Rutina matutina",
        "description": "Pequeños hábitos, gran impacto. 5 pasos en 30s.",
        "author": "LifeDemo",
        "views": 4500,
        "likes": 640,
    },
]


def next_created_at(previous: datetime | None) -> datetime:
    """Current UTC time, nudged forward so it is strictly after *previous*."""
    now = datetime.now(timezone.utc)
    if previous is not None and now <= previous:
        return previous + _TICK
    return now
