"""klaw-outcome: lazy async outcomes with a single failure channel.

Flat imports (preferred):
    from klaw_outcome import Outcome, Success, Failure, AsyncOutcome, Helpers
    from klaw_outcome import safe, lazy, init

Submodule imports (for organization):
    from klaw_outcome.outcome import Success, Failure, sequence
    from klaw_outcome.async_ import AsyncOutcome, sequence, all_
    from klaw_outcome.optional import Some, Nothing
"""

# Configuration
from klaw_outcome._config import OutcomeConfig, get_config, init
from klaw_outcome._logging import add_log_hook, remove_log_hook

# Async
from klaw_outcome.async_ import AsyncOutcome, Helpers

# Capabilities
from klaw_outcome.capabilities import (
    Alt,
    Apply,
    Bifunctor,
    Chain,
    Extend,
    Foldable,
    Functor,
    Setoid,
)

# Decorators
from klaw_outcome.decorators import lazy, safe

# Errors
from klaw_outcome.errors import MissingPatternError, UnsafeCoerceError

# Option types
from klaw_outcome.optional import Nothing, NothingType, Option, Some

# Outcome types
from klaw_outcome.outcome import (
    Failure,
    Outcome,
    Success,
    encase,
    errs,
    is_outcome,
    of,
    oks,
    sequence,
)

__all__ = [
    'Alt',
    'Apply',
    'AsyncOutcome',
    'Bifunctor',
    'Chain',
    'Extend',
    'Failure',
    'Foldable',
    'Functor',
    'Helpers',
    'MissingPatternError',
    'Nothing',
    'NothingType',
    'Option',
    'Outcome',
    'OutcomeConfig',
    'Setoid',
    'Some',
    'Success',
    'UnsafeCoerceError',
    'add_log_hook',
    'encase',
    'errs',
    'get_config',
    'init',
    'is_outcome',
    'lazy',
    'of',
    'oks',
    'remove_log_hook',
    'safe',
    'sequence',
]
