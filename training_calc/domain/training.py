import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol

logger = logging.getLogger(__name__)


# -----------------------
# Constantes communes
# -----------------------
M_IN_KM = 1000        # mètres dans un kilomètre
MIN_IN_HOURS = 60     # minutes dans une heure
LEN_STEP = 0.65       # longueur d'une foulée (m)

# Course
CALORIES_MEAN_SPEED_MULTIPLIER = 18
CALORIES_MEAN_SPEED_SHIFT = 1.79

# Marche
CALORIES_WEIGHT_MULTIPLIER = 0.035
CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029
KMH_IN_MSEC = 0.278   # km/h -> m/s

# Natation
SWIMMING_LEN_STEP = 1.38   # longueur d'un mouvement de bras (m)
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2


class CaloriesCalculator(Protocol):
    """Ce qu'il faut pour produire un InfoMessage."""

    @property
    def training_type(self) -> str: ...

    @property
    def duration(self) -> timedelta: ...

    def distance(self) -> float: ...

    def mean_speed(self) -> float: ...

    def calories(self) -> float: ...


@dataclass(frozen=True)
class Training:
    """
    Séance brute, commune à toutes les activités.

    Utilisée seule, c'est l'activité "générique": distance et vitesse
    moyenne classiques, mais pas de formule de calories (0 kcal).
    """
    # --- Identité ---
    training_type: str        # libellé affiché dans le rapport

    # --- Mouvement ---
    action: int               # nb de répétitions (pas, mouvements de bras)
    len_step: float           # longueur d'une répétition (m)

    # --- Contexte ---
    duration: timedelta
    weight: float             # kg

    def duration_hours(self) -> float:
        return self.duration / timedelta(hours=1)

    def duration_minutes(self) -> float:
        return self.duration / timedelta(minutes=1)

    def distance(self) -> float:
        """Distance parcourue, en km."""
        return self.action * self.len_step / M_IN_KM

    def mean_speed(self) -> float:
        """Vitesse moyenne sur toute la séance, en km/h."""
        return self.distance() / self.duration_hours()

    def calories(self) -> float:
        logger.warning("calories non implémentées pour %r, retourne 0", self.training_type)
        return 0.0


@dataclass(frozen=True)
class Activity:
    training: Training

    @property
    def training_type(self) -> str:
        return self.training.training_type

    @property
    def duration(self) -> timedelta:
        return self.training.duration

    @property
    def weight(self) -> float:
        return self.training.weight

    def distance(self) -> float:
        return self.training.distance()

    def mean_speed(self) -> float:
        return self.training.mean_speed()


@dataclass(frozen=True)
class Running(Activity):

    def calories(self) -> float:
        speed = self.mean_speed()
        kcal = (
            (CALORIES_MEAN_SPEED_MULTIPLIER * speed + CALORIES_MEAN_SPEED_SHIFT)
            * self.weight / M_IN_KM
            * self.training.duration_hours() * MIN_IN_HOURS
        )
        logger.debug("running: speed=%.4f km/h -> %.2f kcal", speed, kcal)
        return kcal


@dataclass(frozen=True)
class Walking(Activity):
    height: float             # cm

    def calories(self) -> float:
        speed_ms = self.mean_speed() * KMH_IN_MSEC
        kcal = (
            CALORIES_WEIGHT_MULTIPLIER * self.weight
            + (speed_ms ** 2 / self.height) * CALORIES_SPEED_HEIGHT_MULTIPLIER * self.weight
        ) * self.training.duration_hours() * MIN_IN_HOURS
        logger.debug("walking: speed=%.4f m/s height=%s cm -> %.2f kcal", speed_ms, self.height, kcal)
        return kcal


@dataclass(frozen=True)
class Swimming(Activity):
    """
    Longueur d'un mouvement de bras fixée à SWIMMING_LEN_STEP: passer par
    Swimming.create(). validate_training() refuse une autre valeur.
    """
    length_pool: int          # longueur du bassin (m)
    count_pool: int           # nb de longueurs

    @classmethod
    def create(
        cls,
        training_type: str,
        action: int,
        duration: timedelta,
        weight: float,
        length_pool: int,
        count_pool: int,
    ) -> "Swimming":
        training = Training(
            training_type=training_type,
            action=action,
            len_step=SWIMMING_LEN_STEP,
            duration=duration,
            weight=weight,
        )
        return cls(training=training, length_pool=length_pool, count_pool=count_pool)

    def mean_speed(self) -> float:
        # dépend uniquement de la géométrie du bassin, pas des mouvements de bras
        return self.length_pool * self.count_pool / M_IN_KM / self.training.duration_hours()

    def calories(self) -> float:
        speed = self.mean_speed()
        kcal = (
            (speed + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
            * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
            * self.weight
            * self.training.duration_hours()
        )
        logger.debug("swimming: speed=%.4f km/h -> %.2f kcal", speed, kcal)
        return kcal
