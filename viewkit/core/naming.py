# viewkit/core/naming.py
"""
Singular and plural forms of collection names ("page" <-> "pages").

The inflector is passed in by the caller; `inflection` is used when none is.
"""
from typing import Optional, Protocol
import inflection

class Inflector(Protocol):
    def singularize(self, word: str) -> str: ...
    def pluralize(self, word: str) -> str: ...

def single(name: str, inflector: Optional[Inflector] = None) -> str:
    return (inflector or inflection).singularize(name)

def plural(name: str, inflector: Optional[Inflector] = None) -> str:
    return (inflector or inflection).pluralize(name)
