from datetime import timedelta
from typing import List, Optional

from training_calc.analysis.training_report import read_data, training_names
from training_calc.config import get_locale
from training_calc.domain.errors import validate_training
from training_calc.domain.training import (
    LEN_STEP,
    CaloriesCalculator,
    Running,
    Swimming,
    Training,
    Walking,
)
from training_calc.logging_config import setup_logging


def sample_trainings(locale: Optional[str] = None) -> List[CaloriesCalculator]:
    names = training_names(locale)

    swimming = Swimming.create(
        training_type=names["swimming"],
        action=2000,
        duration=timedelta(minutes=90),
        weight=85,
        length_pool=50,
        count_pool=5,
    )

    walking = Walking(
        training=Training(
            training_type=names["walking"],
            action=20000,
            len_step=LEN_STEP,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
        ),
        height=185,
    )

    running = Running(
        training=Training(
            training_type=names["running"],
            action=5000,
            len_step=LEN_STEP,
            duration=timedelta(minutes=30),
            weight=85,
        ),
    )

    return [swimming, walking, running]


def main():
    setup_logging()
    locale = get_locale()

    for training in sample_trainings(locale):
        validate_training(training)
        print(read_data(training, locale))


if __name__ == "__main__":
    main()
