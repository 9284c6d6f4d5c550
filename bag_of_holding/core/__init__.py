"""Random primitives shared by every generator: dice, weighted choice, errors."""

from .dice import Die, Roll, roll, roll_multiple, roll_pool
from .exceptions import (
    BagOfHoldingError,
    CharacterBuildError,
    EmptyCandidatesError,
    ExhaustedAbilitiesError,
    MissingAbilityScores,
    MissingRace,
)
from .rng import RandomSource, rng_from_entropy, seeded_rng
from .weighted import (
    choose_exp_weighted,
    choose_multiple_exp_weighted,
    choose_weighted,
    exp_weight,
    exp_weights,
)

__all__ = [
    'Die',
    'Roll',
    'roll',
    'roll_multiple',
    'roll_pool',
    'BagOfHoldingError',
    'CharacterBuildError',
    'EmptyCandidatesError',
    'ExhaustedAbilitiesError',
    'MissingAbilityScores',
    'MissingRace',
    'RandomSource',
    'rng_from_entropy',
    'seeded_rng',
    'choose_exp_weighted',
    'choose_multiple_exp_weighted',
    'choose_weighted',
    'exp_weight',
    'exp_weights',
]
