"""Core data models shared by the frame pipeline."""
