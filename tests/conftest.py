"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def direct_network_dict():
    """Inputs and bias wired straight to one output, no hidden neurons."""
    return {
        'neurons': [
            {'id': 0, 'type': 'input'},
            {'id': 1, 'type': 'input'},
            {'id': 2, 'type': 'bias'},
            {'id': 3, 'type': 'output'},
        ],
        'links': [
            {'from': 0, 'to': 3, 'weight': 1.0},
            {'from': 1, 'to': 3, 'weight': 1.0},
            {'from': 2, 'to': 3, 'weight': 0.5},
        ],
        'activation': 'identity'
    }


@pytest.fixture
def self_connected_network_dict():
    """Input → output, with the output feeding back into itself."""
    return {
        'neurons': [
            {'id': 0, 'type': 'input'},
            {'id': 1, 'type': 'bias'},
            {'id': 2, 'type': 'output'},
        ],
        'links': [
            {'from': 0, 'to': 2, 'weight': 1.0},
            {'from': 2, 'to': 2, 'weight': 1.0},
        ],
        'activation': 'identity'
    }


@pytest.fixture
def recurrent_network_dict():
    """Input → hidden → output, with the output feeding back into the hidden neuron."""
    return {
        'neurons': [
            {'id': 0, 'type': 'input'},
            {'id': 1, 'type': 'bias'},
            {'id': 2, 'type': 'hidden'},
            {'id': 3, 'type': 'output'},
        ],
        'links': [
            {'from': 0, 'to': 2, 'weight': 1.0},
            {'from': 3, 'to': 2, 'weight': 1.0},
            {'from': 2, 'to': 3, 'weight': 1.0},
        ],
        'activation': 'identity'
    }
