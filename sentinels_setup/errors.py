"""Exceptions raised by the setup engine.

Callers translate these at the edges: the CLI into exit codes, the web
routes into HTTP errors. Neither is ever retried by the engine itself.
"""


class SetupError(RuntimeError):
    """Base class for setup search failures."""


class StructuralError(SetupError):
    """The request can never succeed without changing its inputs.

    Too many players for the eligible heroes, too few distinct base
    identities, or an empty villain/environment pool.
    """


class SearchExhausted(SetupError):
    """No candidate scored inside the band within the trial cap."""

    def __init__(self, trials: int) -> None:
        super().__init__(f"No setup found in {trials} iterations.")
        self.trials = trials
