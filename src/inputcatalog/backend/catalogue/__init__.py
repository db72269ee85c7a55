"""String catalogue: ``.ts`` loading, lookup and rendering of UI strings."""

from .active import ActiveCatalogue
from .errors import (
    CatalogueError,
    ContextNotFound,
    MalformedCatalogue,
    MessageNotFound,
    PlaceholderMismatch,
)
from .models import Catalogue, Context, Location, Message, TranslationState
from .placeholders import placeholders_in, render
from .registry import (
    available_locales,
    get_translator,
    load_locale_catalogue,
    load_translations,
    normalise_locale,
    reset_catalogue_cache,
    resolve_locale,
    translations_payload,
)
from .translator import Translator, select_variant
from .ts_format import dump_catalogue, load_catalogue_file, parse_catalogue, write_catalogue_file

__all__ = [
    "ActiveCatalogue",
    "Catalogue",
    "CatalogueError",
    "Context",
    "ContextNotFound",
    "Location",
    "MalformedCatalogue",
    "Message",
    "MessageNotFound",
    "PlaceholderMismatch",
    "TranslationState",
    "Translator",
    "available_locales",
    "dump_catalogue",
    "get_translator",
    "load_catalogue_file",
    "load_locale_catalogue",
    "load_translations",
    "normalise_locale",
    "parse_catalogue",
    "placeholders_in",
    "render",
    "reset_catalogue_cache",
    "resolve_locale",
    "select_variant",
    "translations_payload",
    "write_catalogue_file",
]
