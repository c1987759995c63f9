from datetime import timedelta
from typing import Union

from training_calc.domain.training import SWIMMING_LEN_STEP, Activity, Swimming, Training, Walking


class InvalidTrainingError(ValueError):
    """Séance dont les entrées rendent les formules absurdes."""


class InvalidDurationError(InvalidTrainingError):
    """Durée nulle ou négative (vitesse moyenne indéfinie)."""


def _base_training(calculator: Union[Training, Activity]) -> Training:
    if isinstance(calculator, Training):
        return calculator
    if isinstance(calculator, Activity):
        return calculator.training
    raise TypeError(
        f"validation possible uniquement pour Training / Running / Walking / Swimming, "
        f"reçu {type(calculator).__name__}"
    )


def validate_training(calculator: Union[Training, Activity]) -> None:
    """
    Contrôle optionnel, les formules elles-mêmes ne vérifient rien.
    Lève InvalidDurationError / InvalidTrainingError au premier problème,
    TypeError si l'objet n'est pas une séance de ce module.
    """
    training = _base_training(calculator)

    if training.duration <= timedelta(0):
        raise InvalidDurationError(
            f"{training.training_type}: durée invalide ({training.duration})"
        )
    if training.weight <= 0:
        raise InvalidTrainingError(f"{training.training_type}: poids invalide ({training.weight})")
    if training.len_step <= 0:
        raise InvalidTrainingError(
            f"{training.training_type}: longueur de pas invalide ({training.len_step})"
        )

    if isinstance(calculator, Walking) and calculator.height <= 0:
        raise InvalidTrainingError(f"{training.training_type}: taille invalide ({calculator.height})")

    if isinstance(calculator, Swimming):
        if calculator.length_pool <= 0 or calculator.count_pool <= 0:
            raise InvalidTrainingError(
                f"{training.training_type}: bassin invalide "
                f"({calculator.length_pool} m x {calculator.count_pool})"
            )
        if training.len_step != SWIMMING_LEN_STEP:
            raise InvalidTrainingError(
                f"{training.training_type}: longueur de mouvement {training.len_step} m, "
                f"attendu {SWIMMING_LEN_STEP} m (utiliser Swimming.create)"
            )
