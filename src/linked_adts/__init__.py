"""linked_adts - a singly-linked list and a position-addressed binary tree."""

from .config import DemoConfig, load_config
from .errors import (
    LinkedADTError,
    OutOfRangeError,
    MissingNodeError,
    ConfigError,
)
from .linkedlist import NOT_FOUND, Element, LinkedList
from .position import Direction, Position
from .tree import Node, Tree

__all__ = [
    "DemoConfig",
    "load_config",
    "LinkedADTError",
    "OutOfRangeError",
    "MissingNodeError",
    "ConfigError",
    "NOT_FOUND",
    "Element",
    "LinkedList",
    "Direction",
    "Position",
    "Node",
    "Tree",
]
