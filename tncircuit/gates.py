"""Standard qubit gates and states, as matrices and as the tensors consumed by
:meth:`tncircuit.tensor.TensorNetworkCircuit.add_gate`.
"""

import math
import cmath
import functools

import numpy as np

from .core import DEFAULT_DTYPE


def make_immutable(x):
    """Make array ``x`` read-only, so cached copies can be shared safely.
    """
    x.flags.writeable = False
    return x


@functools.lru_cache(8)
def computational_state(bit, dtype=DEFAULT_DTYPE):
    """The single qubit basis vector ``|0>`` or ``|1>``.

    Parameters
    ----------
    bit : {'0', '1', 0, 1}
        Which basis state.
    """
    bit = str(bit)
    if bit not in ('0', '1'):
        raise ValueError(f"Basis state should be '0' or '1', got '{bit}'.")
    x = np.zeros(2, dtype=dtype)
    x[int(bit)] = 1.0
    return make_immutable(x)


def gate_tensor(G):
    """Reshape the ``2**k x 2**k`` matrix ``G``, acting as ``G[out, in]``,
    into a rank ``2k`` tensor whose first ``k`` axes are the inputs and last
    ``k`` axes the outputs, each ordered like the target qubits.

    Examples
    --------

        >>> gate_tensor(pauli('X')).shape
        (2, 2)

        >>> gate_tensor(CNOT()).shape
        (2, 2, 2, 2)

    """
    G = np.asarray(G)
    d = G.shape[0]
    k = int(round(math.log2(d)))
    if G.shape != (d, d) or 2**k != d:
        raise ValueError(f"Expected a square matrix of size 2**k, got shape "
                         f"{G.shape}.")
    T = G.reshape((2,) * (2 * k))
    T = T.transpose(tuple(range(k, 2 * k)) + tuple(range(k)))
    return make_immutable(np.ascontiguousarray(T))


@functools.lru_cache(8)
def pauli(xyz, dtype=DEFAULT_DTYPE):
    """The single qubit pauli matrices.

    Parameters
    ----------
    xyz : {'I', 'X', 'Y', 'Z'}
        Which matrix, lowercase also accepted.
    """
    xyz = {'i': 'I', 'x': 'X', 'y': 'Y', 'z': 'Z'}.get(xyz, xyz)
    ops = {
        'I': [[1, 0], [0, 1]],
        'X': [[0, 1], [1, 0]],
        'Y': [[0, -1j], [1j, 0]],
        'Z': [[1, 0], [0, -1]],
    }
    return make_immutable(np.array(ops[xyz], dtype=dtype))


@functools.lru_cache(8)
def hadamard(dtype=DEFAULT_DTYPE):
    """The Hadamard gate.
    """
    H = np.array([[1., 1.],
                  [1., -1.]], dtype=dtype) / 2**0.5
    return make_immutable(H)


@functools.lru_cache(128)
def phase_gate(phi, dtype=DEFAULT_DTYPE):
    """The generalized qubit phase-gate, which adds phase ``phi`` to the
    ``|1>`` state.
    """
    Rp = np.array([[1., 0.],
                   [0., cmath.exp(1.0j * phi)]], dtype=dtype)
    return make_immutable(Rp)


def T_gate(dtype=DEFAULT_DTYPE):
    """The T-gate (pi/8 gate).
    """
    return phase_gate(math.pi / 4, dtype=dtype)


def S_gate(dtype=DEFAULT_DTYPE):
    """The S-gate (phase gate).
    """
    return phase_gate(math.pi / 2, dtype=dtype)


@functools.lru_cache(128)
def rotation(phi, xyz='Z', dtype=DEFAULT_DTYPE):
    """The single qubit rotation ``exp(-i phi sigma_xyz / 2)``.
    """
    P = pauli(xyz, dtype=dtype)
    R = (math.cos(phi / 2) * pauli('I', dtype=dtype) -
         1.0j * math.sin(phi / 2) * P)
    return make_immutable(R.astype(dtype))


@functools.lru_cache(8)
def swap(dtype=DEFAULT_DTYPE):
    """The swap operator acting on two qubits.
    """
    S = np.eye(4, dtype=dtype)[[0, 2, 1, 3]]
    return make_immutable(S)


@functools.lru_cache(16)
def controlled(s, dtype=DEFAULT_DTYPE):
    """Construct a controlled pauli gate for two qubits, the first qubit being
    the control.

    Parameters
    ----------
    s : str
        Which pauli to use, including 'not' aliased to 'x'.
    """
    # alias not and NOT to x
    s = {'NOT': 'x', 'not': 'x'}.get(s, s)
    p0 = np.diag(np.array([1, 0], dtype=dtype))
    p1 = np.diag(np.array([0, 1], dtype=dtype))
    op = np.kron(p0, pauli('I', dtype=dtype)) + np.kron(p1, pauli(s, dtype))
    return make_immutable(op)


def CNOT(dtype=DEFAULT_DTYPE):
    """The controlled-not gate.
    """
    return controlled('not', dtype=dtype)


def CZ(dtype=DEFAULT_DTYPE):
    """The controlled-Z gate.
    """
    return controlled('z', dtype=dtype)


_GATES = {
    'H': hadamard,
    'X': functools.partial(pauli, 'X'),
    'Y': functools.partial(pauli, 'Y'),
    'Z': functools.partial(pauli, 'Z'),
    'S': S_gate,
    'T': T_gate,
    'RX': functools.partial(rotation, xyz='X'),
    'RY': functools.partial(rotation, xyz='Y'),
    'RZ': functools.partial(rotation, xyz='Z'),
    'CNOT': CNOT,
    'CX': CNOT,
    'CZ': CZ,
    'SWAP': swap,
}


def get_gate(name, *params, dtype=DEFAULT_DTYPE):
    """Get the tensor form of gate ``name``, e.g. ``get_gate('CNOT')`` or
    ``get_gate('RX', 0.3)``.
    """
    try:
        fn = _GATES[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown gate '{name}', should be one of "
                         f"{tuple(_GATES)}.")
    return gate_tensor(fn(*params, dtype=dtype))
