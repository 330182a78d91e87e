"""
bblast: alignment-free D2 comparison of nucleotide sequence sets.
"""

__version__ = "0.1.0"
