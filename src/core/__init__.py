"""
Core comparison primitives and domain models.

This module contains the generic two-value maximum abstraction: the shared
ordering contract, the free max_of operation, and the PairHolder model.
"""
