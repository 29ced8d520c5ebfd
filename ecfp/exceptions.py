"""
Exceptions raised by the ECFP package.
"""


class ECFPError(Exception):
    """Base class for all ECFP errors."""


class ParseError(ECFPError, ValueError):
    """A molecule description could not be parsed."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Could not parse molecule: {source!r}")


class GraphContractError(ECFPError, LookupError):
    """The molecule graph broke its query contract (e.g. missing bond)."""


class InternalInconsistency(ECFPError, RuntimeError):
    """
    Two submissions produced the same fingerprint and the same bond coverage
    at the same depth.

    Either two different substructures collided in the hash function, or the
    registry was fed inconsistent state. Callers should abandon the current
    molecule and carry on with the next one.
    """

    def __init__(self, fingerprint: int, depth: int):
        self.fingerprint = fingerprint
        self.depth = depth
        super().__init__(
            f"Fingerprint {fingerprint} submitted twice with identical "
            f"bond coverage at depth {depth}"
        )


__all__ = [
    'ECFPError',
    'ParseError',
    'GraphContractError',
    'InternalInconsistency',
]
