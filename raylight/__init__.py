"""Interactive 2D ray occlusion demo: a draggable light casting rays at a circle."""
