"""
Quantum circuits as tensor network graphs.
"""

# Gates and states
from .gates import (
    computational_state, gate_tensor, get_gate, pauli, hadamard, phase_gate,
    T_gate, S_gate, rotation, swap, controlled, CNOT, CZ,
)

# Tensor network graph
from .tensor import (
    TensorNetworkCircuit, Node, Edge, InteractiveBackend, TensorBackend,
    network_from_dict, network_from_json,
)


__all__ = [
    # Gates ----------------------------------------------------------------- #
    'computational_state', 'gate_tensor', 'get_gate', 'pauli', 'hadamard',
    'phase_gate', 'T_gate', 'S_gate', 'rotation', 'swap', 'controlled',
    'CNOT', 'CZ',
    # Tensor ---------------------------------------------------------------- #
    'TensorNetworkCircuit', 'Node', 'Edge', 'InteractiveBackend',
    'TensorBackend', 'network_from_dict', 'network_from_json',
]
