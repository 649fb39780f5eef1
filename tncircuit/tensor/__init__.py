from .errors import (
    TensorNetworkCircuitError,
    InvalidArgumentError,
    DimensionMismatchError,
    LengthMismatchError,
    InvalidCharacterError,
    UnknownIndexError,
    UnknownLabelError,
)
from .backends import (
    TensorBackend,
    InteractiveBackend,
)
from .decomp import (
    svd_truncated,
    split_array,
)
from .network import (
    Node,
    Edge,
    TensorNetworkCircuit,
    edge_from_dict,
    node_from_dict,
    network_from_dict,
    network_from_json,
)


__all__ = (
    "TensorNetworkCircuitError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "LengthMismatchError",
    "InvalidCharacterError",
    "UnknownIndexError",
    "UnknownLabelError",
    "TensorBackend",
    "InteractiveBackend",
    "svd_truncated",
    "split_array",
    "Node",
    "Edge",
    "TensorNetworkCircuit",
    "edge_from_dict",
    "node_from_dict",
    "network_from_dict",
    "network_from_json",
)
