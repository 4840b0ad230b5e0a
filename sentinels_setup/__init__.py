"""Sentinels setup finder: difficulty-calibrated random game setups.

Public surface:

    load_engine()        build a SetupEngine from the bundled dataset
    SetupEngine          catalog + calibration table + player offsets
    StructuralError      the request can never be satisfied
    SearchExhausted      no setup scored inside the band within the trial cap
"""

from .engine import SetupEngine  # noqa: F401
from .errors import SearchExhausted, SetupError, StructuralError  # noqa: F401
from .data import load_engine  # noqa: F401
