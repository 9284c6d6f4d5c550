# bag_of_holding/core/exceptions.py
"""Exception hierarchy for character generation."""


class BagOfHoldingError(Exception):
    """Base exception for all generation failures."""
    pass


class EmptyCandidatesError(BagOfHoldingError, ValueError):
    """Raised when a weighted choice has nothing (or not enough) to choose from."""

    def __init__(self, requested: int = 1, available: int = 0):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot choose {requested} item(s) from {available} candidate(s)"
        )


class ExhaustedAbilitiesError(BagOfHoldingError, RuntimeError):
    """Raised when no ability can absorb a racial increase without passing the cap."""

    def __init__(self, increase: int, cap: int):
        self.increase = increase
        self.cap = cap
        super().__init__(
            f"No ability can take a +{increase} increase without exceeding {cap}"
        )


class CharacterBuildError(BagOfHoldingError):
    """Raised when a character generation step runs before its prerequisites."""
    pass


class MissingAbilityScores(CharacterBuildError):
    """Ability scores must be generated before this step."""

    def __init__(self):
        super().__init__(
            "This character is missing ability scores. "
            "Please choose or generate ability scores before this step."
        )


class MissingRace(CharacterBuildError):
    """A race must be chosen before this step."""

    def __init__(self):
        super().__init__(
            "This character is missing a race. "
            "Please choose or generate a race option before this step."
        )
