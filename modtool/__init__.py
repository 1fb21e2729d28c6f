"""Read and write MOD model file records: basic values, joints, materials and TEV blocks, with JSON conversion for materials."""

__version__ = "0.1.0"