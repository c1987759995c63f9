from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class InfoMessage:
    # --- Séance ---
    training_type: str
    duration: timedelta

    # --- Métriques dérivées ---
    distance: float       # km
    speed: float          # km/h
    calories: float       # kcal

    @property
    def duration_minutes(self) -> float:
        return self.duration / timedelta(minutes=1)
