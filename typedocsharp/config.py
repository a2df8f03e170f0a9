"""
Configuration for the TypeDoc to C# conversion.
"""

from dataclasses import dataclass


DEFAULT_NAMESPACE = 'TypedocConverter'


@dataclass(frozen=True)
class TypedocConfig:
    """ Conversion options. Immutable for the duration of a run. """
    number_type: str = 'double'
    any_type: str = 'object'
    use_winrt_promise: bool = False
    namespace: str = DEFAULT_NAMESPACE
