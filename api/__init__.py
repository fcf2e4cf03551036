"""HTTP surface for the role manager."""
