"""Resolution runtime package.

Provides branch selection, placeholder interpolation, alias expansion and
the Translator API. Depends on the store package for the data model.

Python 3.13+.
"""

from .aliases import expand_aliases, resolve_aliases
from .config import TranslatorConfig
from .interpolator import interpolate
from .plural_rules import cldr_pluralizer, select_plural_category
from .request import ResolutionRequest
from .resolution_context import ResolutionContext
from .selector import select, selector_key
from .translator import Translator

__all__ = [
    "ResolutionContext",
    "ResolutionRequest",
    "Translator",
    "TranslatorConfig",
    "cldr_pluralizer",
    "expand_aliases",
    "interpolate",
    "resolve_aliases",
    "select",
    "select_plural_category",
    "selector_key",
]
