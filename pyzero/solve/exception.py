from __future__ import annotations


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a root finding method fails to
    converge and the caller has asked for failures to be raised rather
    than returned (e.g. ``find_root(..., disp=True)`` or
    `RootResult.raise_if_failed`).  Additional information is included
    to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` usually carries the fields of the `RootResult` that
    caused it (`root`, `iterations`, `fevals`) as extra attributes.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code of the failed solution (see
            `pyzero.solve.results`).  A failure always has `flag` != 0.
        details : str, default = None
            Short description of the specific type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add attribute values below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str
