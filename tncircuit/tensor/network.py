"""Tensor network graph representation of quantum circuits.

Every gate, input state and output state of a circuit is a :class:`Node`,
holding an ordered list of index labels (the axes of its tensor) and the
label of the data stored in a backend. Every index is an :class:`Edge`,
joining at most two nodes, which is directed from input to output unless it
is a *virtual* bond created by splitting a tensor.
"""

import json
import numbers

import numpy as np
from autoray import infer_backend, shape

from ..core import get_default_threshold
from ..utils import check_opt, concat, frequencies, split_label
from ..utils import progbar as _progbar
from ..gates import computational_state
from .backends import InteractiveBackend
from .errors import (
    TensorNetworkCircuitError,
    InvalidArgumentError,
    DimensionMismatchError,
    LengthMismatchError,
    InvalidCharacterError,
    UnknownIndexError,
    UnknownLabelError,
)


class Node:
    """A tensor in the network.

    Parameters
    ----------
    indices : sequence of str
        The index labels of each axis of the tensor, in order.
    data_label : str
        Where the tensor's data is stored in the backend.
    """

    __slots__ = ('indices', 'data_label')

    def __init__(self, indices, data_label):
        self.indices = list(indices)
        self.data_label = data_label

    def replace_index(self, old, new):
        """Relabel every axis called ``old`` to ``new``.
        """
        self.indices = [new if ix == old else ix for ix in self.indices]

    def copy(self):
        return Node(self.indices, self.data_label)

    def to_dict(self):
        """Convert to a serializable dictionary.
        """
        return {
            'indices': [str(ix) for ix in self.indices],
            'data_label': str(self.data_label),
        }

    def __repr__(self):
        return f"Node(indices={self.indices}, data_label='{self.data_label}')"


class Edge:
    """An index of the network, connecting up to two nodes.

    Parameters
    ----------
    src : str or None, optional
        The node the edge comes from, ``None`` if open on the input side.
    dst : str or None, optional
        The node the edge goes to, ``None`` if open on the output side.
    qubit : int or None, optional
        The (1-based) qubit wire this edge belongs to, ``None`` for virtual
        bonds.
    virtual : bool, optional
        Whether this is a bond introduced by splitting a tensor, in which case
        ``src`` and ``dst`` don't imply any direction.
    """

    __slots__ = ('src', 'dst', 'qubit', 'virtual')

    def __init__(self, src=None, dst=None, qubit=None, virtual=False):
        self.src = src
        self.dst = dst
        self.qubit = qubit
        self.virtual = virtual

    @property
    def endpoints(self):
        """The nodes this edge is attached to.
        """
        return tuple(x for x in (self.src, self.dst) if x is not None)

    def replace_endpoint(self, old, new):
        """Reattach the end of this edge at node ``old`` to node ``new``.
        """
        if self.src == old:
            self.src = new
        elif self.dst == old:
            self.dst = new

    def copy(self):
        return Edge(self.src, self.dst, self.qubit, self.virtual)

    def to_dict(self):
        """Convert to a serializable dictionary.
        """
        return {
            'src': None if self.src is None else str(self.src),
            'dst': None if self.dst is None else str(self.dst),
            'qubit': self.qubit,
            'virtual': self.virtual,
        }

    def __repr__(self):
        return (f"Edge(src={self.src!r}, dst={self.dst!r}, "
                f"qubit={self.qubit!r}, virtual={self.virtual!r})")


def edge_from_dict(d):
    """Create an :class:`Edge` from its dictionary form.
    """
    try:
        return Edge(d['src'], d['dst'], d['qubit'], bool(d['virtual']))
    except (KeyError, TypeError) as e:
        raise InvalidArgumentError(f"Invalid edge specification {d!r}.") from e


def node_from_dict(d):
    """Create a :class:`Node` from its dictionary form.
    """
    try:
        return Node([str(ix) for ix in d['indices']], str(d['data_label']))
    except (KeyError, TypeError) as e:
        raise InvalidArgumentError(f"Invalid node specification {d!r}.") from e


def _parse_threshold(threshold):
    try:
        return get_default_threshold(threshold)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            f"Invalid singular value threshold {threshold!r}.") from e


class TensorNetworkCircuit:
    """The tensor network graph of a quantum circuit.

    Parameters
    ----------
    number_qubits : int
        How many qubits the circuit acts on.
    backend : TensorBackend, optional
        Where to store tensor data, a fresh
        :class:`~tncircuit.tensor.backends.InteractiveBackend` by default.

    Attributes
    ----------
    number_qubits : int
        The number of qubits.
    input_qubits : list[str]
        For each qubit, the index at the input of the circuit.
    output_qubits : list[str]
        For each qubit, the index currently at the output of the circuit, to
        which the next gate on that qubit will attach.
    nodes : dict[str, Node]
        The tensors of the network, in insertion order.
    edges : dict[str, Edge]
        The indices of the network, in insertion order.
    counters : dict[str, int]
        The last number used for each kind of label.
    backend : TensorBackend
        Holds the actual tensor data.

    Examples
    --------

        >>> from tncircuit.gates import get_gate
        >>> tn = TensorNetworkCircuit(2)
        >>> tn.add_gate(get_gate('H'), [1])
        'node_1'
        >>> tn.add_gate(get_gate('CNOT'), [1, 2])
        'node_2'
        >>> tn.out_neighbors('node_1')
        ['node_2']

    """

    def __init__(self, number_qubits, backend=None):
        if (
            isinstance(number_qubits, bool) or
            not isinstance(number_qubits, numbers.Integral) or
            number_qubits < 1
        ):
            raise InvalidArgumentError(
                f"The number of qubits should be a positive integer, got "
                f"{number_qubits!r}.")

        number_qubits = int(number_qubits)
        index_labels = [f"index_{i}" for i in range(1, number_qubits + 1)]

        self.number_qubits = number_qubits
        self.input_qubits = list(index_labels)
        self.output_qubits = list(index_labels)
        self.nodes = {}
        self.edges = {
            ix: Edge(None, None, i, False)
            for i, ix in enumerate(index_labels, 1)
        }
        self.counters = {'index': number_qubits, 'node': 0}
        self.backend = InteractiveBackend() if backend is None else backend

    @classmethod
    def _from_parts(cls, number_qubits, input_qubits, output_qubits,
                    nodes, edges, counters, backend):
        tn = object.__new__(cls)
        tn.number_qubits = number_qubits
        tn.input_qubits = input_qubits
        tn.output_qubits = output_qubits
        tn.nodes = nodes
        tn.edges = edges
        tn.counters = counters
        tn.backend = InteractiveBackend() if backend is None else backend
        return tn

    @classmethod
    def from_gates(cls, number_qubits, gates, decompose=False,
                   threshold=None, backend=None, progbar=False):
        """Build a network from a sequence of ``(data, target_qubits)``
        pairs, as produced by a circuit frontend. See :meth:`add_gates`.
        """
        tn = cls(number_qubits, backend=backend)
        tn.add_gates(gates, decompose=decompose, threshold=threshold,
                     progbar=progbar)
        return tn

    def copy(self):
        """Copy the structure of this network. The backend, and thus the
        tensor data, is shared with the copy.
        """
        return self._from_parts(
            self.number_qubits,
            list(self.input_qubits),
            list(self.output_qubits),
            {k: node.copy() for k, node in self.nodes.items()},
            {k: edge.copy() for k, edge in self.edges.items()},
            dict(self.counters),
            self.backend,
        )

    __copy__ = copy

    @property
    def num_nodes(self):
        return len(self.nodes)

    @property
    def num_edges(self):
        return len(self.edges)

    # ------------------------------- Labels -------------------------------- #

    def new_label(self, kind):
        """Create a new unique label such as ``'node_7'`` by incrementing the
        counter for ``kind``.
        """
        self.counters[kind] = self.counters.get(kind, 0) + 1
        return f"{kind}_{self.counters[kind]}"

    def _observe_label(self, label, kind):
        """Make sure a label supplied from outside can never be generated
        again by :meth:`new_label`.
        """
        _, num = split_label(label)
        if num is not None:
            self.counters[kind] = max(self.counters.get(kind, 0), num)

    def _new_data_label(self, node_label):
        """Pick a data label for ``node_label`` that is not yet held by the
        backend, which can be shared with copies of this network.
        """
        data_label = node_label
        i = 0
        while data_label in self.backend:
            i += 1
            data_label = f"{node_label}:{i}"
        return data_label

    def _get_node(self, node_label):
        try:
            return self.nodes[node_label]
        except KeyError:
            raise UnknownLabelError(f"No node labelled '{node_label}'.")

    def _get_edge(self, index):
        try:
            return self.edges[index]
        except KeyError:
            raise UnknownIndexError(f"No edge with index '{index}'.")

    def get_tensor(self, node_label):
        """Fetch the data of node ``node_label`` from the backend.
        """
        node = self._get_node(node_label)
        return self.backend.fetch_tensor(node.data_label)

    # ------------------------------- Gates --------------------------------- #

    def _parse_target_qubits(self, target_qubits):
        try:
            qubits = list(target_qubits)
        except TypeError:
            raise InvalidArgumentError(
                f"Target qubits should be a sequence of integers, got "
                f"{target_qubits!r}.")

        if not qubits:
            raise InvalidArgumentError("At least one target qubit needed.")

        for q in qubits:
            if isinstance(q, bool) or not isinstance(q, numbers.Integral):
                raise InvalidArgumentError(
                    f"Target qubits should be integers, got {q!r}.")
            if not 1 <= q <= self.number_qubits:
                raise InvalidArgumentError(
                    f"Target qubit {q} out of range, qubits are numbered "
                    f"from 1 to {self.number_qubits}.")

        if len(set(qubits)) != len(qubits):
            raise InvalidArgumentError(
                f"Duplicate target qubits in {qubits}.")

        return [int(q) for q in qubits]

    def add_gate(self, data, target_qubits, decompose=False, threshold=None):
        """Add a gate acting on ``target_qubits`` to the end of the circuit.

        Parameters
        ----------
        data : array_like
            The gate tensor, of rank ``2 * len(target_qubits)``. The first
            half of its axes are the inputs and the second half the outputs,
            each in the same order as ``target_qubits``.
        target_qubits : sequence of int
            The (1-based) qubits the gate acts on.
        decompose : bool, optional
            If the gate acts on two qubits, immediately split it into two
            tensors each acting on a single qubit, see
            :meth:`decompose_tensor`.
        threshold : float, optional
            Singular value threshold to use if decomposing.

        Returns
        -------
        str or (str, str)
            The label of the new node, or the labels of the two nodes if
            decomposed.
        """
        target_qubits = self._parse_target_qubits(target_qubits)
        n = len(target_qubits)

        if infer_backend(data) == 'builtins':
            data = np.asarray(data)
        ndim = len(shape(data))
        if ndim != 2 * n:
            raise DimensionMismatchError(
                f"A gate on {n} qubit(s) needs a tensor of rank {2 * n}, got "
                f"rank {ndim}.")

        if n == 2 and decompose:
            threshold = _parse_threshold(threshold)

        # inputs connect to whatever is currently at the output
        input_indices = [self.output_qubits[q - 1] for q in target_qubits]
        output_indices = [self.new_label('index') for _ in range(n)]

        # TODO: share the data of repeated gates between nodes
        node_label = self.new_label('node')
        data_label = self._new_data_label(node_label)
        self.backend.store_tensor(node_label, data_label, data)

        for q, ix in zip(target_qubits, output_indices):
            self.output_qubits[q - 1] = ix
        self.nodes[node_label] = Node(input_indices + output_indices,
                                      data_label)

        for q, ix_in, ix_out in zip(target_qubits, input_indices,
                                    output_indices):
            old_edge = self.edges[ix_in]
            self.edges[ix_out] = Edge(node_label, old_edge.dst, q)

            # a node already downstream (e.g. an output state) now attaches
            # to the new output index instead
            if old_edge.dst is not None:
                self.nodes[old_edge.dst].replace_index(ix_in, ix_out)

            old_edge.dst = node_label

        if n == 2 and decompose:
            return self.decompose_tensor(
                node_label,
                [input_indices[0], output_indices[0]],
                [input_indices[1], output_indices[1]],
                threshold=threshold,
            )

        return node_label

    def add_gates(self, gates, decompose=False, threshold=None,
                  progbar=False):
        """Add a sequence of gates to the circuit.

        Parameters
        ----------
        gates : iterable of (array_like, sequence of int)
            Each gate tensor and the qubits it targets, see :meth:`add_gate`.
        decompose : bool, optional
            Whether to split each two qubit gate.
        threshold : float, optional
            Singular value threshold to use if decomposing.
        progbar : bool, optional
            Whether to show a progress bar.

        Returns
        -------
        list
            The result of :meth:`add_gate` for each gate.
        """
        if progbar:
            gates = _progbar(gates)

        return [
            self.add_gate(data, qubits, decompose=decompose,
                          threshold=threshold)
            for data, qubits in gates
        ]

    # ------------------------------ Boundaries ----------------------------- #

    def _add_boundary(self, config, which):
        check_opt('which', which, ('input', 'output'))

        if not isinstance(config, str):
            raise InvalidArgumentError(
                f"Boundary configuration should be a string, got {config!r}.")
        if len(config) != self.number_qubits:
            raise LengthMismatchError(
                f"Boundary configuration '{config}' has length {len(config)} "
                f"but the circuit has {self.number_qubits} qubits.")
        bad = sorted(set(config) - {'0', '1'})
        if bad:
            raise InvalidCharacterError(
                f"Boundary configuration '{config}' contains {bad}, only '0' "
                "and '1' are allowed.")

        if which == 'input':
            indices = self.input_qubits
        else:
            indices = self.output_qubits

        new_labels = []
        for ix, bit in zip(indices, config):
            edge = self.edges[ix]
            bound = edge.src if which == 'input' else edge.dst
            if bound is not None:
                continue

            node_label = self.new_label('node')
            data_label = self._new_data_label(node_label)
            self.backend.store_tensor(node_label, data_label,
                                      computational_state(bit))
            self.nodes[node_label] = Node([ix], data_label)

            if which == 'input':
                edge.src = node_label
            else:
                edge.dst = node_label
            new_labels.append(node_label)

        return new_labels

    def add_input(self, config):
        """Attach computational basis states to the inputs of the circuit,
        e.g. ``tn.add_input('010')``. Qubits whose input is already attached
        are left alone.

        Returns
        -------
        list[str]
            The labels of the newly created nodes.
        """
        return self._add_boundary(config, 'input')

    def add_output(self, config):
        """Attach computational basis states to the outputs of the circuit,
        e.g. ``tn.add_output('010')``. Qubits whose output is already
        attached are left alone.

        Returns
        -------
        list[str]
            The labels of the newly created nodes.
        """
        return self._add_boundary(config, 'output')

    # ------------------------------ Adjacency ------------------------------ #

    def in_neighbors(self, node_label):
        """The nodes with a non-virtual edge going into ``node_label``.
        """
        node = self._get_node(node_label)
        nbrs = []
        for ix in node.indices:
            edge = self.edges[ix]
            if (
                not edge.virtual and
                edge.src is not None and
                edge.src != node_label
            ):
                nbrs.append(edge.src)
        return nbrs

    def out_neighbors(self, node_label):
        """The nodes with a non-virtual edge coming from ``node_label``.
        """
        node = self._get_node(node_label)
        nbrs = []
        for ix in node.indices:
            edge = self.edges[ix]
            if (
                not edge.virtual and
                edge.dst is not None and
                edge.dst != node_label
            ):
                nbrs.append(edge.dst)
        return nbrs

    def virtual_neighbors(self, node_label):
        """The nodes sharing a virtual bond with ``node_label``.
        """
        node = self._get_node(node_label)
        nbrs = []
        for ix in node.indices:
            edge = self.edges[ix]
            if not edge.virtual:
                continue
            if edge.dst is not None and edge.dst != node_label:
                nbrs.append(edge.dst)
            elif edge.src is not None and edge.src != node_label:
                nbrs.append(edge.src)
        return nbrs

    def neighbors(self, node_label):
        """All nodes connected to ``node_label``: incoming, then outgoing,
        then virtual.
        """
        return list(concat((
            self.in_neighbors(node_label),
            self.out_neighbors(node_label),
            self.virtual_neighbors(node_label),
        )))

    def in_edges(self, node_label):
        """The non-virtual indices going into ``node_label``.
        """
        node = self._get_node(node_label)
        return [
            ix for ix in node.indices
            if not self.edges[ix].virtual and self.edges[ix].dst == node_label
        ]

    def out_edges(self, node_label):
        """The non-virtual indices coming from ``node_label``.
        """
        node = self._get_node(node_label)
        return [
            ix for ix in node.indices
            if not self.edges[ix].virtual and self.edges[ix].src == node_label
        ]

    # ---------------------------- Decomposition ---------------------------- #

    def _check_new_node_label(self, label):
        if label is None:
            return
        if label in self.nodes:
            raise InvalidArgumentError(
                f"Node label '{label}' is already in use.")
        # retired labels may still be referenced by copies sharing the backend
        kind, num = split_label(label)
        if label in self.backend or (
            kind == 'node' and num is not None and num <= self.counters['node']
        ):
            raise InvalidArgumentError(
                f"Node label '{label}' has already been used.")

    def decompose_tensor(self, node_label, left_indices, right_indices,
                         threshold=None, left_label=None, right_label=None):
        """Split a node into two nodes joined by a new virtual bond, using a
        truncated singular value decomposition of its tensor. The left node
        gets the axes ``left_indices`` then the bond, the right node gets the
        bond then ``right_indices``.

        Parameters
        ----------
        node_label : str
            The node to split.
        left_indices : sequence of str
            Indices of the node to put on the left node.
        right_indices : sequence of str
            Indices of the node to put on the right node. Together with
            ``left_indices`` these should be every index of the node exactly
            once.
        threshold : float, optional
            Singular values at or below this are discarded, defaults to
            ``TNCIRCUIT_SVD_THRESHOLD`` (``1e-15``).
        left_label : str, optional
            Label for the left node, generated if not given.
        right_label : str, optional
            Label for the right node, generated if not given.

        Returns
        -------
        left_label, right_label : str
        """
        node = self._get_node(node_label)
        left_indices = list(left_indices)
        right_indices = list(right_indices)
        both = left_indices + right_indices

        index_map = {ix: i for i, ix in enumerate(node.indices)}
        for ix in both:
            if ix not in index_map:
                raise UnknownIndexError(
                    f"Index '{ix}' is not an index of node '{node_label}'.")

        repeated = [ix for ix, c in frequencies(both).items() if c > 1]
        if repeated:
            raise UnknownIndexError(
                f"Indices {repeated} are assigned more than once.")

        missing = [ix for ix in node.indices if ix not in both]
        if missing:
            raise UnknownIndexError(
                f"Indices {missing} of node '{node_label}' are not assigned "
                "to either side.")

        self._check_new_node_label(left_label)
        self._check_new_node_label(right_label)
        if left_label is not None and left_label == right_label:
            raise InvalidArgumentError(
                f"Left and right labels must differ, got '{left_label}'.")
        threshold = _parse_threshold(threshold)

        left_data, right_data = self.backend.decompose_tensor(
            node.data_label,
            [index_map[ix] for ix in left_indices],
            [index_map[ix] for ix in right_indices],
            threshold=threshold,
        )

        # plumb the new nodes into the graph
        if left_label is None:
            left_label = self.new_label('node')
        else:
            self._observe_label(left_label, 'node')
        if right_label is None:
            right_label = self.new_label('node')
        else:
            self._observe_label(right_label, 'node')
        bond = self.new_label('index')

        left_data_label = self._new_data_label(left_label)
        self.backend.store_tensor(left_label, left_data_label, left_data)
        right_data_label = self._new_data_label(right_label)
        self.backend.store_tensor(right_label, right_data_label, right_data)
        self.nodes[left_label] = Node(left_indices + [bond], left_data_label)
        self.nodes[right_label] = Node([bond] + right_indices,
                                       right_data_label)

        for ix in left_indices:
            self.edges[ix].replace_endpoint(node_label, left_label)
        for ix in right_indices:
            self.edges[ix].replace_endpoint(node_label, right_label)

        self.edges[bond] = Edge(left_label, right_label, None, True)

        del self.nodes[node_label]

        return left_label, right_label

    # ---------------------------- Serialization ---------------------------- #

    def to_dict(self):
        """Convert the structure of this network (but not the tensor data) to
        a nested dictionary of plain python objects.
        """
        return {
            'number_qubits': self.number_qubits,
            'edges': {
                str(ix): edge.to_dict() for ix, edge in self.edges.items()
            },
            'nodes': {
                str(k): node.to_dict() for k, node in self.nodes.items()
            },
            'input_qubits': [str(ix) for ix in self.input_qubits],
            'output_qubits': [str(ix) for ix in self.output_qubits],
        }

    @classmethod
    def from_dict(cls, d, backend=None):
        """Create a network from the output of :meth:`to_dict`. The label
        counters are set from the largest number found in the edge and node
        labels respectively.

        Parameters
        ----------
        d : dict
            The structure of the network.
        backend : TensorBackend, optional
            The backend holding the tensor data, a new empty
            :class:`~tncircuit.tensor.backends.InteractiveBackend` by default.
        """
        try:
            number_qubits = d['number_qubits']
            edges_d = d['edges']
            nodes_d = d['nodes']
            input_qubits = [str(ix) for ix in d['input_qubits']]
            output_qubits = [str(ix) for ix in d['output_qubits']]
        except (KeyError, TypeError) as e:
            raise InvalidArgumentError(
                f"Invalid tensor network specification: {e!r}.") from e

        if not (isinstance(edges_d, dict) and isinstance(nodes_d, dict)):
            raise InvalidArgumentError(
                "The 'edges' and 'nodes' entries should be mappings.")

        if (
            isinstance(number_qubits, bool) or
            not isinstance(number_qubits, numbers.Integral) or
            number_qubits < 1
        ):
            raise InvalidArgumentError(
                f"The number of qubits should be a positive integer, got "
                f"{number_qubits!r}.")
        if not (len(input_qubits) == len(output_qubits) == number_qubits):
            raise InvalidArgumentError(
                f"Expected {number_qubits} input and output qubit indices, "
                f"got {len(input_qubits)} and {len(output_qubits)}.")

        counters = {'index': 0, 'node': 0}

        edges = {}
        for k, v in edges_d.items():
            _, num = split_label(k)
            if num is not None:
                counters['index'] = max(counters['index'], num)
            edges[str(k)] = edge_from_dict(v)

        nodes = {}
        for k, v in nodes_d.items():
            _, num = split_label(k)
            if num is not None:
                counters['node'] = max(counters['node'], num)
            nodes[str(k)] = node_from_dict(v)

        return cls._from_parts(int(number_qubits), input_qubits,
                               output_qubits, nodes, edges, counters, backend)

    def to_json(self, indent=None):
        """Convert the structure of this network to a json string.
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str, backend=None):
        """Create a network from the output of :meth:`to_json`.
        """
        try:
            d = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(f"Invalid json: {e}.") from e
        return cls.from_dict(d, backend=backend)

    # ----------------------------- Inspection ------------------------------ #

    def check(self):
        """Check the structure of the network is consistent, raising an error
        describing the first problem found.
        """
        for label, node in self.nodes.items():
            for ix, c in frequencies(node.indices).items():
                if c > 1:
                    raise TensorNetworkCircuitError(
                        f"Node '{label}' has index '{ix}' {c} times.")
                if ix not in self.edges:
                    raise UnknownIndexError(
                        f"Index '{ix}' of node '{label}' has no edge.")
                if label not in self.edges[ix].endpoints:
                    raise TensorNetworkCircuitError(
                        f"Edge '{ix}' is not attached to node '{label}', "
                        "which has it as an index.")

        for ix, edge in self.edges.items():
            for label in edge.endpoints:
                if label not in self.nodes:
                    raise UnknownLabelError(
                        f"Edge '{ix}' is attached to unknown node '{label}'.")
                if ix not in self.nodes[label].indices:
                    raise TensorNetworkCircuitError(
                        f"Edge '{ix}' is attached to node '{label}', which "
                        "doesn't have it as an index.")
            if edge.virtual and edge.qubit is not None:
                raise TensorNetworkCircuitError(
                    f"Virtual edge '{ix}' has qubit {edge.qubit}.")

        for which in ('input_qubits', 'output_qubits'):
            indices = getattr(self, which)
            if len(indices) != self.number_qubits:
                raise TensorNetworkCircuitError(
                    f"Expected {self.number_qubits} {which}, got "
                    f"{len(indices)}.")
            for ix in indices:
                if ix not in self.edges:
                    raise UnknownIndexError(
                        f"Index '{ix}' in {which} has no edge.")

    def to_networkx(self):
        """Convert to a ``networkx.MultiDiGraph``, with an edge for every
        index attached to two nodes, keyed by the index label and carrying the
        ``qubit`` and ``virtual`` attributes.
        """
        import networkx as nx

        G = nx.MultiDiGraph()
        G.add_nodes_from(self.nodes)
        for ix, edge in self.edges.items():
            if edge.src is not None and edge.dst is not None:
                G.add_edge(edge.src, edge.dst, key=ix,
                           qubit=edge.qubit, virtual=edge.virtual)
        return G

    def get_inputs_output_size_dict(self):
        """Get the ``inputs``, ``output`` and ``size_dict`` describing the
        contraction of this network, as used by contraction planners such as
        ``cotengra``. The output is every index attached to only one node.
        """
        inputs = [tuple(node.indices) for node in self.nodes.values()]

        size_dict = {}
        for node in self.nodes.values():
            dims = self.backend.shape(node.data_label)
            size_dict.update(zip(node.indices, dims))

        output = tuple(
            ix for ix, edge in self.edges.items()
            if len(edge.endpoints) == 1
        )
        return inputs, output, size_dict

    def __repr__(self):
        return (f"{self.__class__.__name__}("
                f"number_qubits={self.number_qubits}, "
                f"num_nodes={self.num_nodes}, "
                f"num_edges={self.num_edges})")


def network_from_dict(d, backend=None):
    """Create a :class:`TensorNetworkCircuit` from its dictionary form.
    """
    return TensorNetworkCircuit.from_dict(d, backend=backend)


def network_from_json(json_str, backend=None):
    """Create a :class:`TensorNetworkCircuit` from its json form.
    """
    return TensorNetworkCircuit.from_json(json_str, backend=backend)
