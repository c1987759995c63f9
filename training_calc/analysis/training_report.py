import logging
from typing import Dict, Optional

from training_calc.config import get_locale
from training_calc.domain.info_message import InfoMessage
from training_calc.domain.training import CaloriesCalculator

logger = logging.getLogger(__name__)


# -----------------------------
# Libellés (par langue)
# -----------------------------
LABELS: Dict[str, Dict[str, str]] = {
    "ru": {
        "training_type": "Тип тренировки",
        "duration": "Длительность",
        "distance": "Дистанция",
        "speed": "Ср. скорость",
        "calories": "Потрачено ккал",
        "min": "мин",
        "km": "км",
        "kmh": "км/ч",
    },
    "en": {
        "training_type": "Training type",
        "duration": "Duration",
        "distance": "Distance",
        "speed": "Avg. speed",
        "calories": "Calories burned",
        "min": "min",
        "km": "km",
        "kmh": "km/h",
    },
    "fr": {
        "training_type": "Type d'entraînement",
        "duration": "Durée",
        "distance": "Distance",
        "speed": "Vitesse moy.",
        "calories": "Calories dépensées",
        "min": "min",
        "km": "km",
        "kmh": "km/h",
    },
}

TRAINING_NAMES: Dict[str, Dict[str, str]] = {
    "ru": {"swimming": "Плавание", "walking": "Ходьба", "running": "Бег"},
    "en": {"swimming": "Swimming", "walking": "Walking", "running": "Running"},
    "fr": {"swimming": "Natation", "walking": "Marche", "running": "Course"},
}


def _resolve_locale(locale: Optional[str]) -> str:
    loc = (locale or get_locale()).strip().lower()
    if loc not in LABELS:
        raise ValueError(f"Langue inconnue: {loc!r} (dispo: {', '.join(sorted(LABELS))})")
    return loc


def labels_for(locale: Optional[str] = None) -> Dict[str, str]:
    return LABELS[_resolve_locale(locale)]


def training_names(locale: Optional[str] = None) -> Dict[str, str]:
    return TRAINING_NAMES[_resolve_locale(locale)]


# -----------------------------
# Rapport
# -----------------------------
def training_info(calculator: CaloriesCalculator) -> InfoMessage:
    """
    Construit le rapport d'une séance. Chaque métrique vient de l'activité
    elle-même (vitesse de la natation, calories de la course, etc.).
    """
    info = InfoMessage(
        training_type=calculator.training_type,
        duration=calculator.duration,
        distance=calculator.distance(),
        speed=calculator.mean_speed(),
        calories=calculator.calories(),
    )
    logger.debug("rapport %s: %s", info.training_type, info)
    return info


def format_message(info: InfoMessage, locale: Optional[str] = None) -> str:
    lb = labels_for(locale)
    return (
        f"{lb['training_type']}: {info.training_type}\n"
        f"{lb['duration']}: {info.duration_minutes:.2f} {lb['min']}\n"
        f"{lb['distance']}: {info.distance:.2f} {lb['km']}\n"
        f"{lb['speed']}: {info.speed:.2f} {lb['kmh']}\n"
        f"{lb['calories']}: {info.calories:.2f}\n"
    )


def read_data(calculator: CaloriesCalculator, locale: Optional[str] = None) -> str:
    return format_message(training_info(calculator), locale)
