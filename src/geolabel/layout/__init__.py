"""Label placement engine: sizing, collision resolution, leader lines and dragging."""
