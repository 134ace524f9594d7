"""Residual overlap diagnostics.

Overlapping labels form an undirected graph; its connected components are
the clusters the resolver could not pull apart.
"""

from __future__ import annotations

__all__ = ["find_overlaps", "overlap_clusters"]

from collections.abc import Mapping

import networkx as nx

from geolabel.layout.constants import LABEL_PADDING
from geolabel.layout.geometry import BBox, boxes_overlap


def find_overlaps(
    boxes: Mapping[str, BBox],
    padding: float = LABEL_PADDING,
) -> list[tuple[str, str]]:
    """Return every overlapping (id, id) pair, ids in sorted order."""
    ids = sorted(boxes)
    pairs: list[tuple[str, str]] = []
    for i, a in enumerate(ids):
        for b in ids[i + 1 :]:
            if boxes_overlap(boxes[a], boxes[b], padding):
                pairs.append((a, b))
    return pairs


def overlap_clusters(
    boxes: Mapping[str, BBox],
    padding: float = LABEL_PADDING,
) -> list[frozenset[str]]:
    """Group mutually overlapping labels into clusters.

    Labels that overlap nothing are left out.  Clusters are ordered by
    their smallest member id.
    """
    G = nx.Graph()
    G.add_edges_from(find_overlaps(boxes, padding))
    clusters = [frozenset(c) for c in nx.connected_components(G)]
    return sorted(clusters, key=min)
