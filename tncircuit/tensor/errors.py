"""Exceptions raised when a tensor network circuit is used incorrectly.
"""


class TensorNetworkCircuitError(Exception):
    pass


class InvalidArgumentError(TensorNetworkCircuitError, ValueError):
    """Malformed qubit lists, qubit counts, labels or documents."""


class DimensionMismatchError(TensorNetworkCircuitError, ValueError):
    """Rank of a gate array disagrees with the number of target qubits."""


class LengthMismatchError(TensorNetworkCircuitError, ValueError):
    """Boundary configuration string has the wrong length."""


class InvalidCharacterError(TensorNetworkCircuitError, ValueError):
    """Boundary configuration string contains something other than 0 or 1."""


class UnknownIndexError(TensorNetworkCircuitError, LookupError):
    pass


class UnknownLabelError(TensorNetworkCircuitError, LookupError):
    pass
