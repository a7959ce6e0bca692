"""Extension registry and media classification.

The browser needs the MIME type of each file to play it. Files are expected
to carry an extension that matches their content (``jpg`` not ``jpeg``), so
the extension alone decides the media type.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from mediaindex.models.core import Classification, MediaType

SUPERTYPE = "media"

# Declaration order is significant: it is the section order of the gallery.
DEFAULT_REGISTRY: Mapping[str, Classification] = MappingProxyType(
    {
        "jpg": Classification(type=MediaType.IMAGE, supertype=SUPERTYPE),
        "png": Classification(type=MediaType.IMAGE, supertype=SUPERTYPE),
        "mp4": Classification(type=MediaType.VIDEO, supertype=SUPERTYPE),
        "mp3": Classification(type=MediaType.AUDIO, supertype=SUPERTYPE),
    }
)


def classify(
    extension: str, registry: Mapping[str, Classification] = DEFAULT_REGISTRY
) -> Optional[Classification]:
    """Look up the classification of *extension*.

    Matching is exact and case-sensitive; ``"JPG"`` and ``".jpg"`` are not
    registered.
    """
    return registry.get(extension)


def gallery_css_class(registry: Mapping[str, Classification] = DEFAULT_REGISTRY) -> str:
    """Build the gallery container class: supertype, then each type once.

    Example: ``"media image video audio"`` for the default registry.
    """
    classes: list[str] = []
    for classification in registry.values():
        for name in (classification.supertype, classification.type.value):
            if name not in classes:
                classes.append(name)
    return " ".join(classes)
