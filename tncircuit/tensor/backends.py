"""Backends that hold the numeric data of tensor network circuits.

The graph structure in :mod:`tncircuit.tensor.network` only ever refers to
tensors by label, all the actual arrays and arithmetic live here.
"""

import numpy as np
from autoray import infer_backend, shape

from . import decomp
from .errors import UnknownLabelError


class TensorBackend:
    """Interface for storing, fetching and splitting tensors by data label.
    """

    def store_tensor(self, node_label, data_label, data):
        raise NotImplementedError

    def fetch_tensor(self, data_label):
        raise NotImplementedError

    def delete_tensor(self, data_label):
        raise NotImplementedError

    def decompose_tensor(self, data_label, left_axes, right_axes,
                         threshold=None):
        """Split the tensor stored under ``data_label`` into two arrays, see
        :func:`tncircuit.tensor.decomp.split_array`. Nothing is stored, it is
        up to the caller to register the results.
        """
        x = self.fetch_tensor(data_label)
        return decomp.split_array(x, left_axes, right_axes,
                                  threshold=threshold)

    def shape(self, data_label):
        return tuple(shape(self.fetch_tensor(data_label)))

    def __contains__(self, data_label):
        raise NotImplementedError


class InteractiveBackend(TensorBackend):
    """Backend which keeps all tensors in memory and performs every operation
    immediately.

    Parameters
    ----------
    tensors : dict, optional
        Initial mapping of data label to array.

    Attributes
    ----------
    tensors : dict[str, array]
        The stored arrays.
    """

    def __init__(self, tensors=None):
        self.tensors = {} if tensors is None else dict(tensors)

    def store_tensor(self, node_label, data_label, data):
        # plain python sequences are converted, other arrays kept as is
        if infer_backend(data) == 'builtins':
            data = np.asarray(data)
        self.tensors[data_label] = data

    def fetch_tensor(self, data_label):
        try:
            return self.tensors[data_label]
        except KeyError:
            raise UnknownLabelError(
                f"No tensor stored under data label '{data_label}'.")

    def delete_tensor(self, data_label):
        self.tensors.pop(data_label, None)

    def __contains__(self, data_label):
        return data_label in self.tensors

    def __len__(self):
        return len(self.tensors)

    def __repr__(self):
        return f"{self.__class__.__name__}(num_tensors={len(self)})"
