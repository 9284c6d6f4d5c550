# bag_of_holding/web/app.py
"""
FastAPI application serving randomly generated character pieces.

Every handler works with its own random source, so requests never share
generator state.
"""

import itertools
import logging
import threading
from typing import Callable, Dict, List, Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import conint

from .. import __version__
from ..config import Settings
from ..core.dice import Die, roll_pool
from ..core.exceptions import BagOfHoldingError
from ..core.rng import RandomSource, rng_from_entropy, seeded_rng
from ..models import (
    AbilityScores,
    Alignment,
    Character,
    Domain,
    Language,
    NameGenerator,
    HeightAndWeightTable,
    Pantheon,
    generate_deity,
    generate_domain,
)
from .schemas import (
    AbilityScoreResult,
    CharacterSheet,
    DeityResult,
    HeightAndWeightResult,
    RollResult,
    StatusResult,
)

log = logging.getLogger(__name__)

APP_NAME = "Bag of Holding"
MAX_POOL_DICE = 100


def rng_factory(seed: Optional[int]) -> Callable[[], RandomSource]:
    """Build the per-request random source provider.

    Without a seed every request gets a fresh entropy-seeded generator.
    With one, request ``n`` gets a generator seeded with ``seed + n`` so
    runs are reproducible but no generator is shared.
    """
    if seed is None:
        return rng_from_entropy

    counter = itertools.count()
    lock = threading.Lock()

    def next_rng() -> RandomSource:
        with lock:
            offset = next(counter)
        return seeded_rng(seed + offset)

    return next_rng


def get_rng(request: Request) -> RandomSource:
    """Dependency handing each request its own random source."""
    return request.app.state.rng_factory()


async def handle_generation_error(request: Request, exc: BagOfHoldingError) -> JSONResponse:
    log.exception("Generation failed for %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the application with all routes registered."""
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title=APP_NAME,
        description="Random D&D character generation",
        version=__version__,
    )
    app.state.settings = settings
    app.state.rng_factory = rng_factory(settings.seed)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(BagOfHoldingError, handle_generation_error)

    # -----------------------------------------------------------------
    #  Status
    # -----------------------------------------------------------------

    @app.get("/")
    def root() -> StatusResult:
        """Root endpoint - basic status check."""
        return StatusResult(status="running", application=APP_NAME, version=__version__)

    @app.get("/health")
    def health_check() -> Dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    # -----------------------------------------------------------------
    #  Generation
    # -----------------------------------------------------------------

    @app.post("/abilities")
    def gen_abilities(rng: RandomSource = Depends(get_rng)) -> Dict[str, AbilityScoreResult]:
        """Roll a fresh set of ability scores."""
        return AbilityScores.generate(rng).to_dict()

    @app.post("/alignments")
    def gen_alignment(rng: RandomSource = Depends(get_rng)) -> str:
        """Generate an alignment with no influences."""
        return str(Alignment.generate(rng))

    @app.post("/characters")
    def gen_character(rng: RandomSource = Depends(get_rng)) -> CharacterSheet:
        """Generate a whole character sheet."""
        return Character.generate(rng).to_sheet()

    # -----------------------------------------------------------------
    #  Deities
    # -----------------------------------------------------------------

    @app.post("/deities")
    def gen_deity(
        domain: Optional[Domain] = None,
        rng: RandomSource = Depends(get_rng),
    ) -> DeityResult:
        """Choose a deity, optionally one with the given domain."""
        deity = generate_deity(rng, domain=domain, required=True)
        return deity.to_dict()

    @app.get("/deities/pantheons")
    def list_pantheons() -> List[str]:
        return [pantheon.value for pantheon in Pantheon]

    @app.get("/deities/domains")
    def list_domains() -> List[str]:
        return [domain.value for domain in Domain]

    @app.post("/deities/domains")
    def gen_domain(rng: RandomSource = Depends(get_rng)) -> str:
        return generate_domain(rng).value

    # -----------------------------------------------------------------
    #  Dice
    # -----------------------------------------------------------------

    @app.get("/dice")
    def list_dice() -> List[str]:
        return [die.value for die in Die]

    @app.post("/dice/roll")
    def roll_dice_pool(
        pool: Dict[Die, conint(ge=0, le=MAX_POOL_DICE)] = Body(..., examples=[{"d6": 2, "d20": 1}]),
        rng: RandomSource = Depends(get_rng),
    ) -> Dict[str, List[int]]:
        """Roll several dice at once, e.g. ``{"d6": 2, "d20": 1}``."""
        log.debug("roll_dice_pool: received %s", {str(d): n for d, n in pool.items()})
        return {die.value: results for die, results in roll_pool(rng, pool).items()}

    @app.post("/dice/{die}/roll")
    def roll_die(die: Die, rng: RandomSource = Depends(get_rng)) -> RollResult:
        value = die.roll(rng)
        log.debug("roll_die: rolled %s -> %s", die, value)
        return RollResult(die=die.value, faces=die.sides, roll=value)

    # -----------------------------------------------------------------
    #  Languages, names, sizes
    # -----------------------------------------------------------------

    @app.get("/languages")
    def list_languages() -> List[str]:
        return [language.value for language in Language]

    @app.get("/names")
    def list_name_generators() -> List[str]:
        return [generator.value for generator in NameGenerator]

    @app.post("/names/{generator}")
    def gen_name(generator: NameGenerator, rng: RandomSource = Depends(get_rng)) -> str:
        return generator.gen(rng)

    @app.get("/height-and-weight")
    def list_height_and_weight_tables() -> List[str]:
        return [table.value for table in HeightAndWeightTable]

    @app.post("/height-and-weight/{table}")
    def gen_height_and_weight(
        table: HeightAndWeightTable,
        rng: RandomSource = Depends(get_rng),
    ) -> HeightAndWeightResult:
        return table.gen(rng).to_dict()

    log.info("Created %s app (seed=%s, cors=%s)", APP_NAME, settings.seed, settings.cors_origins)
    return app
