from .client import generate_client
from .profile import GenerationProfile
from .type_emitter import TypeEmitter
from .typewords import parse_type

__all__ = [
    "GenerationProfile",
    "TypeEmitter",
    "generate_client",
    "parse_type",
]
