"""HTTP surface for the transcript acquisition engine."""
