"""Community detection: Louvain, Girvan-Newman, label propagation and modularity."""

from .girvan_newman import GirvanNewmanResult, girvan_newman
from .label_propagation import LabelPropagationResult, label_propagation
from .louvain import CommunityResult, LouvainConfig, louvain
from .modularity import modularity

__all__ = [
    "CommunityResult",
    "LouvainConfig",
    "LabelPropagationResult",
    "GirvanNewmanResult",
    "louvain",
    "girvan_newman",
    "label_propagation",
    "modularity",
]
