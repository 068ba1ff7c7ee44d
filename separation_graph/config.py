from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Literal, Tuple

SELF_PAIR_POLICIES = ("discard", "invalid")
AGGREGATION_METHODS = ("pairwise", "single_source")
MISSING_ID_POLICIES = ("raise", "passthrough")


@dataclass(frozen=True)
class SeparationConfig:
    """Settings for a degrees-of-separation run.

    self_pairs   : 'discard' drops (v, v) pairs from every count and bucket;
                   'invalid' puts them in bucket 0 next to unreachable pairs.
    method       : 'pairwise' runs one BFS per pair; 'single_source' runs one
                   BFS per start node in parallel. Both give identical results.
    on_missing   : what reassignment does with ids absent from the index space.
    thresholds   : degrees at which cumulative reachability is reported.
    """
    self_pairs: Literal["discard", "invalid"] = "discard"
    method: Literal["pairwise", "single_source"] = "pairwise"
    on_missing: Literal["raise", "passthrough"] = "raise"
    thresholds: Tuple[int, ...] = field(default=(6, 20))
    verbose: bool = True

    def __post_init__(self):
        if self.self_pairs not in SELF_PAIR_POLICIES:
            raise ValueError(f"Unknown self_pairs policy: {self.self_pairs}. "
                             f"Choose from {SELF_PAIR_POLICIES}")
        if self.method not in AGGREGATION_METHODS:
            raise ValueError(f"Unknown method: {self.method}. "
                             f"Choose from {AGGREGATION_METHODS}")
        if self.on_missing not in MISSING_ID_POLICIES:
            raise ValueError(f"Unknown on_missing policy: {self.on_missing}. "
                             f"Choose from {MISSING_ID_POLICIES}")
        object.__setattr__(self, "thresholds", tuple(int(k) for k in self.thresholds))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
