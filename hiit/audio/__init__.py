"""Audio cues."""
