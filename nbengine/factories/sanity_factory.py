from __future__ import annotations
from nbengine.components.interfaces import SanityChecker
from nbengine.components.sanity.sanity import BasicClassificationSanity

def make_sanity_checker() -> SanityChecker:
    return BasicClassificationSanity()
