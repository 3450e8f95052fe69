"""
errors.py — Visualizer Error Taxonomy
======================================
Raised at the operation boundary, BEFORE any structure is touched.

  • InvalidInput     – non-numeric value where a number is required,
                       empty word / prefix, unknown node id, …
  • EmptyStructure   – pop / extract / peek / dequeue on an empty structure
  • UnknownOperation – the session kind has no such operation

"Not found" is deliberately absent: a failed search is a normal,
narrated outcome and becomes a `not-found` Step instead.
"""


class VisualizerError(Exception):
    """Base class for every rejection surfaced to the user."""


class InvalidInput(VisualizerError, ValueError):
    pass


class EmptyStructure(VisualizerError):
    pass


class UnknownOperation(VisualizerError, KeyError):
    def __str__(self) -> str:
        # KeyError repr-quotes its message; keep it readable for the UI
        return str(self.args[0]) if self.args else ""
