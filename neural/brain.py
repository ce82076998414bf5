"""
neatpond module: neural/brain.py

A fixed-topology feedforward network:
- one list of neurons per layer, each ending with a bias neuron pinned to 1.0
  (the output layer's bias is never read)
- weights come from the genome, decoded into [-WEIGHT_RANGE, WEIGHT_RANGE]
- no backward pass; weights never change after decoding
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from neural.neuron import Neuron, decode_weight

Layer = List[Neuron]


class InvalidInputSize(ValueError):
    """The input vector does not match the input layer."""


class InsufficientWeights(ValueError):
    """The weight vector is too short for the topology."""


@dataclass(frozen=True)
class NeuronView:
    output: float
    weights: Tuple[float, ...]


class Brain:
    def __init__(self, topology: Sequence[int]):
        if len(topology) < 2:
            raise ValueError(f"topology needs an input and an output layer, got {list(topology)}")
        self.topology: Tuple[int, ...] = tuple(topology)
        self.layers: List[Layer] = []

        num_layers = len(self.topology)
        for l, size in enumerate(self.topology):
            num_outputs = 0 if l == num_layers - 1 else self.topology[l + 1]
            layer = [Neuron.with_outputs(n, num_outputs) for n in range(size + 1)]
            layer[-1].output = 1.0
            self.layers.append(layer)

    @staticmethod
    def weight_count(topology: Sequence[int]) -> int:
        return sum((topology[l] + 1) * topology[l + 1] for l in range(len(topology) - 1))

    @staticmethod
    def from_genes(topology: Sequence[int], genes: Sequence[float]) -> "Brain":
        brain = Brain(topology)
        brain.set_weights(genes)
        return brain

    def set_weights(self, genes: Sequence[float]) -> None:
        """
        Decode weight genes into connection weights.

        Genes are consumed from the tail: the first neuron of the first layer
        takes the last gene. Surplus genes are ignored.
        """
        remaining = list(genes)
        for layer in self.layers[:-1]:
            for neuron in layer:
                needed = len(neuron.weights)
                if len(remaining) < needed:
                    raise InsufficientWeights(
                        f"topology {list(self.topology)} needs {self.weight_count(self.topology)} weights, "
                        f"got {len(genes)}"
                    )
                for c in range(needed):
                    neuron.weights[c] = decode_weight(remaining.pop())

    def feed_forward(self, inputs: Sequence[float]) -> None:
        input_layer = self.layers[0]
        if len(inputs) != len(input_layer) - 1:
            raise InvalidInputSize(f"expected {len(input_layer) - 1} inputs, got {len(inputs)}")

        for i, value in enumerate(inputs):
            input_layer[i].output = float(value)

        for l in range(1, len(self.layers)):
            previous = self.layers[l - 1]
            # skip the bias neuron
            for neuron in self.layers[l][:-1]:
                neuron.feed_forward(previous)

    def get_results(self) -> List[float]:
        return [n.output for n in self.layers[-1][:-1]]

    def snapshot(self) -> Tuple[Tuple[NeuronView, ...], ...]:
        """Read-only copy of outputs and weights, bias neurons included."""
        return tuple(
            tuple(NeuronView(output=n.output, weights=tuple(n.weights)) for n in layer)
            for layer in self.layers
        )
