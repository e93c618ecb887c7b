class SpeciesError(Exception):
    pass

class IntegralityError(SpeciesError, ArithmeticError):
    """
    A value that counts structures came out non-integral.

    This is never a legitimate result; it means one of the series
    computations is broken.
    """

class RecursionSolveError(SpeciesError, ValueError):
    """
    A recursively defined species could not be solved.

    Raised when some degree of the solution keeps changing under the
    definition: it comes back to an earlier value, so the definition is
    not of the form T = X*R(T), or it is still changing when the
    precision bound runs out.  The callable that was passed to ``rec`` is
    kept in ``expression``, the cause in ``reason``.
    """

    def __init__(self, expression, reason):
        self.expression = expression
        self.reason = reason
        super().__init__("Unable to solve %r recursively: %s" % (expression, reason))
