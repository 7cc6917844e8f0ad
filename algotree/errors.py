# algotree/errors.py

from typing import Optional


class AlgoTreeError(ValueError):
    """Base class for every input validation failure raised by algotree."""


class InvalidSeedLength(AlgoTreeError):
    pass


class IndexOutOfRange(AlgoTreeError):
    pass


class MissingPrivateKey(AlgoTreeError):
    pass


class MalformedPhrase(AlgoTreeError):
    pass


class ChecksumMismatch(AlgoTreeError):
    pass


class MalformedAddress(AlgoTreeError):
    pass


class InvalidKeyLength(AlgoTreeError):
    pass


class InvalidNodeError(AlgoTreeError):
    pass


class InvalidPathError(AlgoTreeError):
    pass


class AccountRangeError(AlgoTreeError):
    """
    Raised by resolve_range when one index cannot be resolved.

    ``index`` is the first failing index, ``cause`` the underlying error.
    """

    def __init__(self, index: int, cause: Optional[AlgoTreeError] = None):
        self.index = index
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"failed to resolve account index {index}{detail}")
