"""Simulations of epigenetic modification networks, CpG states and chromatin signalling."""

__version__ = "0.1.0"
__all__ = ["network", "visualization", "cli", "cpg", "chromatin"]