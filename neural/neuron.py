"""
neatpond module: neural/neuron.py

Neuron primitive for the fixed-topology feedforward brain.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import math

WEIGHT_RANGE = 20.0


def sigmoid(x: float) -> float:
    # math.exp overflows past ~709
    if x < -700.0:
        return 0.0
    return 1.0 / (1.0 + math.exp(-x))


def decode_weight(gene: float) -> float:
    """Map a gene in [0, 1] onto [-WEIGHT_RANGE, WEIGHT_RANGE]."""
    return (-1.0 + gene * 2.0) * WEIGHT_RANGE


@dataclass
class Neuron:
    index: int
    output: float = 0.0
    # one weight per non-bias neuron of the next layer
    weights: List[float] = field(default_factory=list)

    @staticmethod
    def with_outputs(index: int, num_outputs: int) -> "Neuron":
        return Neuron(index=index, weights=[0.0] * num_outputs)

    def feed_forward(self, previous_layer: List["Neuron"]) -> None:
        total = 0.0
        for n in previous_layer:
            total += n.output * n.weights[self.index]
        self.output = sigmoid(total)
